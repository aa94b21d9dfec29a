"""Recursive discovery of files by extension."""

import logging
import os
from pathlib import Path
from typing import Iterator, List

from ..exceptions import NotFoundError

logger = logging.getLogger(__name__)


def normalize_suffix(suffix: str) -> str:
    """Lower-case a suffix and make sure it starts with a dot ("SVG" -> ".svg")."""
    suffix = suffix.strip().lower()
    if suffix and not suffix.startswith("."):
        suffix = "." + suffix
    return suffix


def find_files_by_extension(root: str | Path, suffix: str) -> Iterator[Path]:
    """
    Walk a directory tree depth-first and yield files ending with ``suffix``.

    Matching is case-insensitive on the file name. Symlinked directories are
    not followed and every directory is visited at most once (by real path),
    so the walk always terminates. Sibling order follows the directory
    listing and is not stable; sort the result if order matters.

    Args:
        root: Directory to search
        suffix: File suffix, with or without the leading dot

    Returns:
        Iterator over absolute file paths

    Raises:
        NotFoundError: If root does not exist
    """
    root_path = Path(root).expanduser().absolute()
    if not root_path.is_dir():
        raise NotFoundError(f"Directory not found: {root_path}", root_path)

    return _walk(root_path, normalize_suffix(suffix))


def _walk(root: Path, suffix: str) -> Iterator[Path]:
    pending: List[Path] = [root]
    visited = set()

    while pending:
        current = pending.pop()
        real = os.path.realpath(current)
        if real in visited:
            continue
        visited.add(real)

        try:
            with os.scandir(current) as entries:
                subdirs = []
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(Path(entry.path))
                    elif entry.is_file(follow_symlinks=False) and entry.name.lower().endswith(suffix):
                        yield Path(entry.path)
        except PermissionError as e:
            logger.warning(f"Keine Berechtigung für {current}: {e}")
            continue

        # Reversed so the first listed subdirectory is walked first
        pending.extend(reversed(subdirs))
