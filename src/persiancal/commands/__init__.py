"""Subcommand modules for persiancal.

Provides register_commands() which imports command modules on demand so
``persiancal --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from persiancal.commands.convert import convert
    from persiancal.commands.diff import diff
    from persiancal.commands.now import now

    cli.add_command(now)
    cli.add_command(convert)
    cli.add_command(diff)
