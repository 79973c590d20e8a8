"""Rich console formatting utilities.

Provides the shared stdout/stderr consoles and the one-line message
printers used by the CLI.
"""

import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from yeet.core.theme import get_theme


def _detect_color_system(stream: TextIO) -> str | None:
    """Detect the best color system for the terminal behind ``stream``.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if stream.isatty():
        return "truecolor"
    return None


def make_console(stderr: bool = False) -> Console:
    """Create a themed console writing to stdout or stderr."""
    stream = sys.stderr if stderr else sys.stdout
    return Console(theme=get_theme(), stderr=stderr, color_system=_detect_color_system(stream))


# Shared console instances (theme loaded once at import)
console = make_console()
err_console = make_console(stderr=True)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")


def print_failure(argument: str, message: str) -> None:
    """Print ``<argument>: <message>`` to stderr as plain, unwrapped text."""
    err_console.print(
        f"{argument}: {message}", markup=False, highlight=False, emoji=False, soft_wrap=True
    )
