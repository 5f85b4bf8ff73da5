"""Subcommand modules for meetcount.

Provides register_commands() which uses deferred imports to keep
``meetcount --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from meetcount.commands.count import count
    from meetcount.commands.lookup import days, weekday

    cli.add_command(count)
    cli.add_command(weekday)
    cli.add_command(days)
