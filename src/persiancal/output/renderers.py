"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.  The
primary value (``data["formatted"]``) always comes first on its own line
so that piping plain output keeps working; details follow in verbose mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from persiancal.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from persiancal.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_warning(message: str) -> str:
    """Render one result warning as a ``WARNING: ...`` line."""
    console = create_console()
    console.print(Text("WARNING:", style="pcal.warning"), Text(message))
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    formatted = result.data.get("formatted")
    if formatted is not None:
        return str(formatted)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _primary(console: Console, result: ServiceResult) -> None:
    console.print(Text(str(result.data.get("formatted", "")), style="pcal.date"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="pcal.key")
    style = "pcal.month" if key.startswith("month_name") else ""
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _details_table(data: dict[str, Any], keys: tuple[str, ...]) -> Table:
    table = Table(show_header=False, show_lines=False, pad_edge=False, expand=False, box=None)
    table.add_column("Field", style="pcal.key")
    table.add_column("Value")
    for key in keys:
        if key in data:
            table.add_row(key, str(data[key]))
    return table


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    line = Text(" " * indent)
    line.append(f"{span_data.get('duration_ms', 0.0):>8.3f}ms", style="dim")
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations")
    if annotations:
        # Layouts are user text; Text keeps "[...]" literal.
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})", style="dim")
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pcal.error")
    op = Text(f"  {result.op}", style="pcal.op")
    console.print(label, op, Text(" — "), Text(msg))
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────

_DATE_DETAIL_KEYS = (
    "jalali",
    "gregorian",
    "month_name",
    "month_name_english",
    "weekday",
    "day_of_year",
    "is_leap",
)


def _render_date(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ``now`` and ``convert``: the formatted date, details when verbose."""
    _primary(console, result)
    if verbose:
        console.print(_details_table(result.data, _DATE_DETAIL_KEYS))
        _render_meta(console, result)


def _render_diff(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ``diff``: the distance, plus the total when a breakdown is shown."""
    _primary(console, result)
    total = result.data.get("total")
    if total is not None:
        console.print(Text(f"(Total: {total})", style="pcal.total"))
    if verbose:
        for key in ("from", "to", "days"):
            if key in result.data:
                _field(console, key, result.data[key])
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: OK line plus key-value pairs."""
    console.print(Text("OK", style="pcal.ok"), Text(f"  {result.op}", style="pcal.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "now": _render_date,
    "convert": _render_date,
    "diff": _render_diff,
}
