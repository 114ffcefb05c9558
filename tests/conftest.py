"""Shared fixtures for find-project tests."""

import sys
from pathlib import Path
from typing import Iterable

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def make_tree(base: Path, dirs: Iterable[str]) -> Path:
    """Create every directory in ``dirs`` (POSIX-style, relative to base)."""
    for rel in dirs:
        (base / rel).mkdir(parents=True, exist_ok=True)
    return base


@pytest.fixture
def root(tmp_path):
    """An empty, fully resolved search root."""
    path = tmp_path / "root"
    path.mkdir()
    return path.resolve()
