"""Entry point: the ``meetcount`` command group."""

from __future__ import annotations

import click
from pydantic import ValidationError

from meetcount import __version__
from meetcount.commands import register_commands
from meetcount.commands._context import AppContext
from meetcount.config.settings import MeetSettings
from meetcount.domain.errors import MeetCountError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="meetcount")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the counts.")
@click.option("-v", "--verbose", is_flag=True, help="Per-meeting table, timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this meetcount.toml instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """meetcount — count recurring meetings between two dates, minus holidays."""
    try:
        settings = MeetSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except (MeetCountError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc

    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
