"""Command: show today's date in the Jalali calendar."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from persiancal.commands._base import PcalCommand

if TYPE_CHECKING:
    from persiancal.commands._context import AppContext


@click.command(
    cls=PcalCommand,
    examples="""\
  persiancal now
  persiancal now --format "yyyy/MM/dd"
  persiancal now --long
  persiancal now --long --english
  persiancal -p now --time""",
)
@click.option("-f", "--format", "layout", default=None, help="Custom layout, e.g. 'yyyy/MM/dd'.")
@click.option("-l", "--long", "long_format", is_flag=True, help="Long format with month name.")
@click.option("-e", "--english", is_flag=True, help="English month names (with --long).")
@click.option("-t", "--time", "show_time", is_flag=True, help="Append the wall-clock time.")
@click.pass_obj
def now(
    app: AppContext,
    layout: str | None,
    long_format: bool,
    english: bool,
    show_time: bool,
) -> None:
    """Display the current date in the Jalali calendar."""
    app.emit(
        app.calendar.now(
            layout=layout,
            long=long_format,
            english=english,
            show_time=show_time,
        )
    )
