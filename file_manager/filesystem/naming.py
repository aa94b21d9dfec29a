"""Collision-free destination naming."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def next_free_name(desired: str | Path) -> Path:
    """
    Return ``desired`` if it is free, otherwise the first free ``stem_N.ext``.

    The counter starts at 1 for every call and existence is rechecked on each
    probe, so ``report.pdf`` with ``report.pdf`` and ``report_1.pdf`` on disk
    becomes ``report_2.pdf``. The result is only guaranteed free at the moment
    it is computed; call this right before writing.

    Args:
        desired: Destination the caller would like to use

    Returns:
        Path that does not exist yet
    """
    desired_path = Path(desired)
    if not _exists(desired_path):
        return desired_path

    stem = desired_path.stem
    ext = desired_path.suffix
    counter = 1
    while True:
        candidate = desired_path.with_name(f"{stem}_{counter}{ext}")
        if not _exists(candidate):
            logger.debug(f"{desired_path.name} belegt, verwende {candidate.name}")
            return candidate
        counter += 1


def _exists(path: Path) -> bool:
    # Dangling symlinks occupy the name too
    return path.exists() or path.is_symlink()
