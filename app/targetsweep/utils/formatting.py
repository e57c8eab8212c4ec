"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import json
import sys

from rich.console import Console
from rich.markup import escape

from targetsweep.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Diagnostics and logs go to stderr; stdout only carries removed paths
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_path(path: str) -> str:
    """Render a path as a double-quoted, escaped string.

    Quotes, backslashes and control characters are escaped so the line
    maps back to exactly one path. Undecodable bytes (lone surrogates)
    are written as backslash escapes.

    Args:
        path: Filesystem path as returned by ``os.scandir``.

    Returns:
        Quoted representation, e.g. ``"/home/user/project/target"``.
    """
    quoted = json.dumps(path, ensure_ascii=False)
    return quoted.encode("utf-8", "backslashreplace").decode("utf-8")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")
