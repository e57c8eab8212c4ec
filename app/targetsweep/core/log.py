"""Logging setup for the targetsweep CLI.

Library modules only create loggers; handlers are installed here, and
only when the user asks for verbose output.
"""

import logging

from rich.logging import RichHandler

from targetsweep.utils.formatting import err_console


def configure_logging(verbose: bool) -> None:
    """Route targetsweep log records to stderr through Rich.

    Args:
        verbose: If True, emit DEBUG records. Otherwise leave logging
            unconfigured so a normal run prints nothing extra.
    """
    package_logger = logging.getLogger("targetsweep")
    if not verbose or any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)
