"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The renderer can be swapped out in tests.
"""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text


def render_markdown(text: str, console: Console) -> None:
    """Print `text` as word-wrapped Markdown using Rich's default theme."""

    console.print(Markdown(text))


def print_error(console: Console, message: str) -> None:
    """Print a one-line error (meant for a stderr console)."""

    console.print(Text.assemble(("error: ", "bold red"), message))
