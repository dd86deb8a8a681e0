"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup and result emission (stdout/stderr
routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from persiancal.output.formatters import OutputSettings, format_result
from persiancal.output.renderers import render_warning

if TYPE_CHECKING:
    from persiancal.config.settings import PersianCalSettings
    from persiancal.services.calendar import CalendarService
    from persiancal.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PersianCalSettings) -> None:
        self.settings = settings
        self._calendar: CalendarService | None = None

        from persiancal.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from persiancal.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def calendar(self) -> CalendarService:
        """The calendar service (created lazily on first access)."""
        if self._calendar is None:
            from persiancal.services.calendar import CalendarService

            self._calendar = CalendarService(self.settings)
        return self._calendar

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout and returns.  Warnings go to stderr so
          they never pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(render_warning(warning), err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
