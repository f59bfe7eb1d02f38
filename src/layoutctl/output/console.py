"""Rich Console factory and theme for layoutctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LAYOUT_THEME = Theme(
    {
        "lay.ok": "bold green",
        "lay.error": "bold red",
        "lay.warning": "bold yellow",
        "lay.op": "bold cyan",
        "lay.key": "dim",
        "lay.path": "bold blue",
        "lay.module": "magenta",
        "lay.kind.leaf": "green",
        "lay.kind.container": "yellow",
        "lay.accepts": "dim green",
        "lay.content": "italic",
    }
)

_KIND_STYLES: dict[str, str] = {
    "leaf": "lay.kind.leaf",
    "container": "lay.kind.container",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LAYOUT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a node kind."""
    return _KIND_STYLES.get(kind, "")
