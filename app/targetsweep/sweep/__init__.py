"""Sweep module.

This module provides the directory record model, the entry classifier,
output directory removal and the tree sweeper that drives them.
"""

from targetsweep.sweep.classifier import classify_entry, entry_kind
from targetsweep.sweep.models import MANIFEST_NAME, OUTPUT_DIR_NAME, DirectoryRecord, EntryKind
from targetsweep.sweep.operator import RemovalError, remove_output_dir
from targetsweep.sweep.sweeper import TreeSweeper

__all__ = [
    "MANIFEST_NAME",
    "OUTPUT_DIR_NAME",
    "DirectoryRecord",
    "EntryKind",
    "RemovalError",
    "TreeSweeper",
    "classify_entry",
    "entry_kind",
    "remove_output_dir",
]
