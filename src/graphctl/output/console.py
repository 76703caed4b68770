"""Rich Console factory and theme for graphctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  Soft wrapping keeps every
record on one output line whatever the width.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPH_THEME = Theme(
    {
        "graph.ok": "bold green",
        "graph.error": "bold red",
        "graph.warning": "bold yellow",
        "graph.op": "bold cyan",
        "graph.key": "dim",
        "graph.vertex": "bold blue",
        "graph.weight": "magenta",
        "graph.total": "bold",
        "graph.unreachable": "dim",
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
        theme=GRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
