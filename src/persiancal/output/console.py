"""Rich Console factory and theme for persiancal output.

Consoles render into a StringIO buffer so renderers keep a
``render_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PCAL_THEME = Theme(
    {
        "pcal.ok": "bold green",
        "pcal.error": "bold red",
        "pcal.warning": "bold yellow",
        "pcal.op": "bold cyan",
        "pcal.key": "dim",
        "pcal.date": "bold",
        "pcal.month": "magenta",
        "pcal.total": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PCAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
