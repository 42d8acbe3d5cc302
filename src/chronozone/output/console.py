"""Rich Console factory and theme for chronozone output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CHRONO_THEME = Theme(
    {
        "cz.ok": "bold green",
        "cz.error": "bold red",
        "cz.warning": "bold yellow",
        "cz.op": "bold cyan",
        "cz.key": "dim",
        "cz.zone": "bold blue",
        "cz.utc": "dim",
        "cz.summary": "bold",
        "cz.before": "magenta",
        "cz.equal": "green",
        "cz.after": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CHRONO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_relation(relation: str) -> str:
    """Return the Rich style name for a compare relation."""
    return f"cz.{relation}" if relation in ("before", "equal", "after") else ""
