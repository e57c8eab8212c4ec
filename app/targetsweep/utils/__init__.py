"""Utility modules for targetsweep.

This module exports commonly used utility functions.
"""

from targetsweep.utils.formatting import err_console, format_path, print_error

__all__ = [
    "err_console",
    "format_path",
    "print_error",
]
