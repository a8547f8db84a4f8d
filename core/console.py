"""
Console helpers for fileops.

All user-facing output goes through a rich Console. The color helpers are
plain formatting functions: they escape markup in the text they wrap, so
paths containing square brackets print verbatim.
"""

import os
import sys

from rich.console import Console
from rich.markup import escape

from .config import Settings


def displayable(text: str) -> str:
    """
    Make a path safe to write to the console.

    File names that are not valid in the filesystem encoding come back from
    ``os`` with surrogate escapes, which no text stream can encode. Those
    bytes are shown as U+FFFD instead.
    """
    return os.fsencode(text).decode(sys.getfilesystemencoding(), "replace")


def info(text: str) -> str:
    """Highlight a path or query in status lines."""
    return f"[bright_cyan]{escape(displayable(text))}[/bright_cyan]"


def error(text: str) -> str:
    """Format an error message."""
    return f"[bright_red]{escape(displayable(text))}[/bright_red]"


def make_console(settings: Settings) -> Console:
    """Build the console used for a session."""
    return Console(
        color_system="auto" if settings.color else None,
        highlight=False,
        emoji=False,
    )
