"""Removal of build output directories."""

import logging
import shutil

logger = logging.getLogger(__name__)


class RemovalError(Exception):
    """An output directory selected for removal could not be deleted.

    Attributes:
        path: Path of the directory that could not be removed.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Failed to remove directory: {path!r}")


def remove_output_dir(path: str) -> None:
    """Remove an output directory and everything below it.

    The whole subtree is removed with a single ``shutil.rmtree`` call.
    Nothing is rolled back if the removal fails halfway.

    Args:
        path: Path of the directory to remove.

    Raises:
        RemovalError: If any part of the subtree could not be removed.
    """
    logger.info("Removing output directory %s", path)
    try:
        shutil.rmtree(path)
    except OSError as e:
        logger.debug("shutil.rmtree failed for %s: %s", path, e)
        raise RemovalError(path) from e
