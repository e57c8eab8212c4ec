"""Sweep domain models.

This module defines the reserved names that mark a project root and its
build output directory, and the per-directory record filled while a
directory's immediate children are classified.
"""

from dataclasses import dataclass
from enum import Enum

# A directory holding this file is a project root
MANIFEST_NAME: str = "Cargo.toml"

# Build output directory removed when it sits directly inside a project root
OUTPUT_DIR_NAME: str = "target"


class EntryKind(str, Enum):
    """Kind of a directory entry, read without following symlinks.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory.
        OTHER: Symbolic link, socket, device or any other special entry.
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True)
class DirectoryRecord:
    """Classification of one directory, built from a single scan.

    A record lives for exactly one iteration of the sweep loop: it is
    created when a pending path is popped, filled while the children are
    classified, and dropped once the removal decision has been made.

    Attributes:
        is_project_root: A regular file named ``Cargo.toml`` is a direct child.
        output_dir: Path of the direct child directory named ``target``,
            or None. When several are seen the last one wins.
    """

    is_project_root: bool = False
    output_dir: str | None = None
