"""CLI package for targetsweep.

This package contains the Typer application.
"""

from targetsweep.cli.main import app

__all__ = ["app"]
