"""
Pytest config to ensure local package imports work without installation.
"""

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
    """Insert the repo root into sys.path for local imports."""
    repo_root = str(Path(__file__).resolve().parent.parent)
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


_add_repo_root_to_path()

from core import FileEntry  # noqa: E402


@pytest.fixture
def make_files(tmp_path):
    """Create files in tmp_path and return them as FileEntry objects"""
    def _make(*names):
        entries = []
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(name)
            entries.append(FileEntry.from_path(path))
        return entries
    return _make
