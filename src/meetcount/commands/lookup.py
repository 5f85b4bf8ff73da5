"""Commands: single-date calendar lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from meetcount.commands._base import examples_option

if TYPE_CHECKING:
    from meetcount.commands._context import AppContext


@click.command()
@click.argument("date")
@examples_option(
    """\
  meetcount weekday 2024-01-01
  meetcount -q weekday 2024-12-25"""
)
@click.pass_obj
def weekday(app: AppContext, date: str) -> None:
    """Show the day of the week for DATE (YYYY-MM-DD)."""
    app.emit(app.counter.weekday(date))


@click.command()
@click.argument("start")
@click.argument("end")
@examples_option(
    """\
  meetcount days 2024-01-01 2024-12-31
  meetcount --json days 2023-12-31 2024-01-01"""
)
@click.pass_obj
def days(app: AppContext, start: str, end: str) -> None:
    """Count the days from START to END, both included."""
    app.emit(app.counter.days(start, end))
