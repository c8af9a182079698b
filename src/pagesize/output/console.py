"""Rich Console factory and theme for pagesize output.

Consoles write into a StringIO so ``format_result() -> str`` stays a plain
function. Off a TTY (CliRunner, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PAGESIZE_THEME = Theme(
    {
        "ps.ok": "bold green",
        "ps.error": "bold red",
        "ps.op": "bold cyan",
        "ps.key": "dim",
        "ps.name": "bold blue",
        "ps.dimension": "magenta",
        "ps.default": "bold yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console backed by a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed render width; keeps tables from wrapping in tests.
    """
    return Console(
        file=StringIO(),
        theme=PAGESIZE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Return everything rendered so far into a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
