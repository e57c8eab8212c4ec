"""Classification of directory entries during a sweep."""

import logging
import os

from targetsweep.sweep.models import MANIFEST_NAME, OUTPUT_DIR_NAME, DirectoryRecord, EntryKind

logger = logging.getLogger(__name__)


def entry_kind(entry: os.DirEntry[str]) -> EntryKind | None:
    """Determine the kind of a directory entry.

    Symbolic links are never followed, so a link to a directory or to a
    manifest file is reported as ``EntryKind.OTHER``.

    Args:
        entry: Entry produced by ``os.scandir``.

    Returns:
        The entry kind, or None if its metadata could not be read.
    """
    try:
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
    except OSError as e:
        logger.debug("Cannot read metadata of %s: %s", entry.path, e)
        return None

    return EntryKind.OTHER


def classify_entry(
    name: str,
    kind: EntryKind,
    path: str,
    record: DirectoryRecord,
    pending: list[str],
) -> None:
    """Apply the effect of one child entry on its parent's record.

    - A manifest file marks the parent as a project root.
    - An output directory is remembered on the record (last one wins).
    - Any other directory is queued for exploration.
    - Everything else is ignored.

    Args:
        name: Entry name (basename).
        kind: Entry kind as returned by :func:`entry_kind`.
        path: Full path of the entry.
        record: Record of the directory being scanned (mutated).
        pending: Work queue of directories still to visit (mutated).
    """
    if kind is EntryKind.FILE and name == MANIFEST_NAME:
        record.is_project_root = True
        return

    if kind is not EntryKind.DIRECTORY:
        return

    if name == OUTPUT_DIR_NAME:
        record.output_dir = path
    else:
        pending.append(path)
