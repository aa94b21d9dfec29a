"""Shared fixtures: fake Downloads/Documents roots below tmp_path."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from file_manager.settings import LocationRoots
from file_manager.tools import FileManagerTools


@pytest.fixture
def roots(tmp_path):
    """Existing, empty Downloads and Documents directories."""
    roots = LocationRoots(
        downloads=tmp_path / "Downloads",
        documents=tmp_path / "Documents",
    )
    roots.downloads.mkdir()
    roots.documents.mkdir()
    return roots


@pytest.fixture
def tools(roots):
    """Tool registry working on the fake roots."""
    return FileManagerTools(roots=roots, list_limit=20, recent_limit=10)


@pytest.fixture
def make_file():
    """Create a file (and its parents) with optional content and mtime."""

    def _make_file(path: Path, content: bytes = b"data", mtime: float | None = None) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make_file
