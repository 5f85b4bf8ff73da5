"""Command: count meetings from a CSV file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from meetcount.commands._base import examples_option

if TYPE_CHECKING:
    from meetcount.commands._context import AppContext


@click.command()
@examples_option(
    """\
  meetcount count
  meetcount count meetings.csv
  meetcount count meetings.csv --holidays holidays.csv
  meetcount count meetings.csv --no-holidays
  meetcount count meetings.csv --remainder-rule wrapped
  meetcount --json count meetings.csv"""
)
@click.argument(
    "meetings",
    required=False,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "--holidays",
    "holidays",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Holidays CSV (default: [input] holidays_file).",
)
@click.option("--no-holidays", is_flag=True, help="Count every occurrence, ignoring holidays.")
@click.option(
    "--remainder-rule",
    type=click.Choice(["legacy", "wrapped"]),
    default=None,
    help="How leftover days after full weeks are matched (default: config).",
)
@click.pass_obj
def count(
    app: AppContext,
    meetings: Path | None,
    holidays: Path | None,
    no_holidays: bool,
    remainder_rule: str | None,
) -> None:
    """Count each meeting's occurrences, excluding holidays.

    MEETINGS is a CSV of ``start, end, weekday`` rows
    (default: [input] meetings_file, i.e. input.csv).
    """
    app.emit(
        app.counter.count_meetings(
            meetings,
            holidays,
            exclude_holidays=False if no_holidays else None,
            remainder_rule=remainder_rule,
        )
    )
