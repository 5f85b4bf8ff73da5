"""AppContext: the object every command receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from meetcount.config.logging import configure_logging
from meetcount.output.formatters import OutputSettings, format_result
from meetcount.services.telemetry import set_telemetry

if TYPE_CHECKING:
    from meetcount.config.settings import MeetSettings
    from meetcount.services.counter import CounterService
    from meetcount.services.result import ServiceResult


class AppContext:
    """Settings, the counter service, and result output for one invocation."""

    def __init__(self, settings: MeetSettings) -> None:
        self.settings = settings
        self._counter: CounterService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        set_telemetry(settings.verbose)

    @property
    def counter(self) -> CounterService:
        if self._counter is None:
            from meetcount.services.counter import CounterService

            self._counter = CounterService(self.settings)
        return self._counter

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; on failure print to stderr and exit 1.

        Warnings go to stderr unless the output is JSON, which already
        carries them.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
