"""Root CLI group for persiancal with global flags and command registration."""

from __future__ import annotations

import click

from persiancal import __version__
from persiancal.commands import register_commands
from persiancal.commands._context import AppContext
from persiancal.config.settings import PersianCalSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="persiancal")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-p", "--persian", is_flag=True, help="Use Persian digits in output.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    persian: bool,
    config_path: str | None,
) -> None:
    """persiancal — Persian (Jalali/Shamsi) calendar CLI.

    Convert between Gregorian and Jalali dates, show today's Jalali date,
    and calculate date differences.
    """
    ctx.ensure_object(dict)
    settings = PersianCalSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        persian=persian,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
