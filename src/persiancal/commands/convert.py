"""Command: convert a date between the Gregorian and Jalali calendars."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from persiancal.commands._base import PcalCommand

if TYPE_CHECKING:
    from persiancal.commands._context import AppContext


@click.command(
    cls=PcalCommand,
    examples="""\
  persiancal convert 2025-10-26
  persiancal convert 26/10/2025
  persiancal convert 1404-08-04 --reverse
  persiancal convert 2025-10-26 --format "dd MMMM yyyy"
  persiancal convert 1404-08-04 --reverse --format "%d %B %Y"
  persiancal -p convert 2025-10-26""",
)
@click.argument("date")
@click.option("-r", "--reverse", is_flag=True, help="Convert from Jalali to Gregorian.")
@click.option(
    "-f",
    "--format",
    "layout",
    default=None,
    help="Output layout (Jalali tokens, or strftime directives with --reverse).",
)
@click.pass_obj
def convert(app: AppContext, date: str, reverse: bool, layout: str | None) -> None:
    """Convert DATE from Gregorian to Jalali (or back with --reverse).

    Accepted input: yyyy-MM-dd, yyyy/MM/dd or yyyy.MM.dd; Gregorian input
    may also be dd-MM-yyyy.  Persian digits are accepted.
    """
    app.emit(app.calendar.convert(date, reverse=reverse, layout=layout))
