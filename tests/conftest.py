"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

# Nested mapping describing a tree: a dict is a directory, a str is file content
TreeLayout = dict[str, "TreeLayout | str"]


def _build(base: Path, layout: TreeLayout) -> None:
    base.mkdir(parents=True, exist_ok=True)
    for name, child in layout.items():
        if isinstance(child, dict):
            _build(base / name, child)
        else:
            (base / name).write_text(child)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Build a directory tree under tmp_path and return its root."""

    def factory(layout: TreeLayout) -> Path:
        _build(tmp_path, layout)
        return tmp_path

    return factory


@pytest.fixture
def cargo_project() -> TreeLayout:
    """A single crate with a populated build output directory."""
    return {
        "Cargo.toml": '[package]\nname = "demo"\nversion = "0.1.0"\n',
        "src": {"main.rs": "fn main() {}\n"},
        "target": {
            "debug": {
                "demo": "binary",
                "deps": {"libdemo.rlib": "rlib"},
            },
            "obj.o": "object",
        },
    }
