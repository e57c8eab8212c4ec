"""Tree sweeper for Cargo build output directories.

Walks a directory tree with an explicit work list instead of recursion,
so arbitrarily deep trees never grow the call stack. Every visited
directory is scanned once; a ``target`` directory is removed when its
parent also holds a ``Cargo.toml`` file and is explored like any other
directory otherwise.
"""

import logging
import os
from collections.abc import Callable, Iterator

from targetsweep.sweep.classifier import classify_entry, entry_kind
from targetsweep.sweep.models import DirectoryRecord
from targetsweep.sweep.operator import remove_output_dir

logger = logging.getLogger(__name__)


class TreeSweeper:
    """Finds and removes output directories that sit inside project roots.

    A sweeper holds no state between sweeps; each call to :meth:`sweep`
    owns its own work queue.

    Args:
        on_remove: Called with the path of each output directory right
            before it is removed.
    """

    def __init__(self, on_remove: Callable[[str], None] | None = None) -> None:
        self._on_remove = on_remove

    def sweep(self, root: str | os.PathLike[str]) -> list[str]:
        """Sweep a single starting path until its work queue is drained.

        Directories that cannot be listed, the starting path included,
        are skipped silently.

        Args:
            root: Starting directory, relative or absolute. It may not exist.

        Returns:
            Paths of the removed output directories, in removal order.

        Raises:
            RemovalError: If an output directory could not be removed. The
                sweep stops immediately; earlier removals are kept.
        """
        pending: list[str] = [os.fspath(root)]
        removed: list[str] = []

        while pending:
            directory = pending.pop()
            record = self.scan_directory(directory, pending)
            if record is None or record.output_dir is None:
                continue

            if record.is_project_root:
                if self._on_remove is not None:
                    self._on_remove(record.output_dir)
                remove_output_dir(record.output_dir)
                removed.append(record.output_dir)
            else:
                logger.debug("No manifest beside %s, exploring it", record.output_dir)
                pending.append(record.output_dir)

        return removed

    def scan_directory(self, directory: str, pending: list[str]) -> DirectoryRecord | None:
        """Classify the immediate children of one directory.

        Child directories other than the output directory are pushed onto
        ``pending`` as a side effect.

        Args:
            directory: Directory to list.
            pending: Work queue of directories still to visit.

        Returns:
            The filled record, or None if the directory could not be listed.
        """
        try:
            entries = os.scandir(directory)
        except OSError as e:
            logger.debug("Skipping unreadable directory %r: %s", directory, e)
            return None

        record = DirectoryRecord()
        with entries:
            for entry in _iter_entries(entries, directory):
                kind = entry_kind(entry)
                if kind is None:
                    continue
                classify_entry(entry.name, kind, entry.path, record, pending)

        return record


def _iter_entries(
    entries: Iterator[os.DirEntry[str]], directory: str
) -> Iterator[os.DirEntry[str]]:
    """Yield entries until the listing ends or fails.

    A read error in the middle of a listing ends it early; the entries
    seen so far still count.
    """
    while True:
        try:
            entry = next(entries)
        except StopIteration:
            return
        except OSError as e:
            logger.debug("Listing of %r stopped early: %s", directory, e)
            return
        yield entry
