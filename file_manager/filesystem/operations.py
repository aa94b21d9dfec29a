"""File system operations (create, move, copy) with collision-free naming."""

import logging
import shutil
from pathlib import Path

from ..exceptions import NotFoundError, WriteFailedError
from .naming import next_free_name

logger = logging.getLogger(__name__)


def create_directory(path: str | Path) -> bool:
    """
    Create a directory and any missing parents.

    Args:
        path: Directory path to create

    Returns:
        True if created, False if it already existed

    Raises:
        WriteFailedError: If the path is taken by a file or mkdir fails
    """
    path_obj = Path(path).expanduser()

    if path_obj.exists():
        if path_obj.is_dir():
            logger.warning(f"Verzeichnis existiert bereits: {path_obj}")
            return False
        raise WriteFailedError(f"Path already exists as a file: {path_obj}")

    try:
        path_obj.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailedError(f"Could not create directory {path_obj}: {e}") from e

    logger.info(f"Verzeichnis erstellt: {path_obj}")
    return True


def ensure_directory(path: str | Path) -> Path:
    """Create a destination directory if needed and return it."""
    path_obj = Path(path).expanduser()
    try:
        path_obj.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailedError(f"Could not create directory {path_obj}: {e}") from e
    return path_obj


def move_file(source: str | Path, dest_dir: str | Path, name: str | None = None) -> Path:
    """
    Move a file into a directory without overwriting anything there.

    Args:
        source: File to move
        dest_dir: Destination directory (created if missing)
        name: File name in the destination (defaults to the source name)

    Returns:
        Final destination path

    Raises:
        NotFoundError: If source does not exist
        WriteFailedError: If the move fails
    """
    source_path = Path(source).expanduser()

    if not source_path.is_file():
        raise NotFoundError(f"File not found: {source_path}", source_path)

    dest_folder = ensure_directory(dest_dir)
    # Pick the name as late as possible, right before the write
    dest_path = next_free_name(dest_folder / (name or source_path.name))

    try:
        shutil.move(str(source_path), str(dest_path))
    except OSError as e:
        raise WriteFailedError(f"Could not move {source_path} to {dest_path}: {e}") from e

    logger.info(f"Verschoben: {source_path} -> {dest_path}")
    return dest_path


def copy_file(source: str | Path, dest_dir: str | Path, name: str | None = None) -> Path:
    """
    Copy a file (with metadata) into a directory without overwriting anything there.

    Args:
        source: File to copy
        dest_dir: Destination directory (created if missing)
        name: File name in the destination (defaults to the source name)

    Returns:
        Final destination path
    """
    source_path = Path(source).expanduser()

    if not source_path.is_file():
        raise NotFoundError(f"File not found: {source_path}", source_path)

    dest_folder = ensure_directory(dest_dir)
    dest_path = next_free_name(dest_folder / (name or source_path.name))

    try:
        shutil.copy2(str(source_path), str(dest_path))
    except OSError as e:
        raise WriteFailedError(f"Could not copy {source_path} to {dest_path}: {e}") from e

    logger.info(f"Kopiert: {source_path} -> {dest_path}")
    return dest_path
