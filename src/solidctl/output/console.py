"""Rich Console factory and theme for solidctl output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests, pipes)
Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SOLID_THEME = Theme(
    {
        "solid.ok": "bold green",
        "solid.error": "bold red",
        "solid.warning": "bold yellow",
        "solid.op": "bold cyan",
        "solid.key": "dim",
        "solid.heading": "bold",
        "solid.variant.good": "green",
        "solid.variant.bad": "red",
        "solid.amount": "magenta",
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
        theme=SOLID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_variant(variant: str) -> str:
    return f"solid.variant.{variant}" if variant in ("good", "bad") else ""
