"""Command: distance between two Jalali dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from persiancal.commands._base import PcalCommand

if TYPE_CHECKING:
    from persiancal.commands._context import AppContext


@click.command(
    cls=PcalCommand,
    examples="""\
  persiancal diff 1403-01-01 1404-01-01
  persiancal diff 1404-08-04 1404-09-10
  persiancal diff 1404-01-01 1404-12-29 --breakdown
  persiancal diff 1403-01-01 1404-01-01 --days-only
  persiancal -p diff 1403-01-01 1404-01-01""",
)
@click.argument("date1")
@click.argument("date2")
@click.option(
    "-b",
    "--breakdown/--no-breakdown",
    default=None,
    help="Show years, months and days (default from [diff] breakdown).",
)
@click.option("-d", "--days-only", is_flag=True, help="Print only the number of days.")
@click.pass_obj
def diff(
    app: AppContext,
    date1: str,
    date2: str,
    breakdown: bool | None,
    days_only: bool,
) -> None:
    """Calculate the difference between two Jalali dates DATE1 and DATE2."""
    app.emit(app.calendar.diff(date1, date2, breakdown_parts=breakdown, days_only=days_only))
