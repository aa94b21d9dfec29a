"""Zip archive extraction."""

import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..exceptions import ExtractionFailedError, NotFoundError, WriteFailedError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"


@dataclass
class ExtractionResult:
    """Where an archive was extracted and what it contained."""

    archive: Path
    target_dir: Path
    entries: List[str] = field(default_factory=list)


def archive_base_name(archive: str | Path) -> str:
    """'project.zip' -> 'project'; names without the suffix are kept as they are."""
    name = Path(archive).name
    if name.lower().endswith(ARCHIVE_SUFFIX) and len(name) > len(ARCHIVE_SUFFIX):
        return name[: -len(ARCHIVE_SUFFIX)]
    return name


def extract_archive(
    archive: str | Path,
    destination_root: str | Path,
    target_dir: Optional[str | Path] = None,
) -> ExtractionResult:
    """
    Extract a zip archive into a directory named after it.

    Args:
        archive: Path to the zip file
        destination_root: Directory in which the target directory is created
        target_dir: Explicit target directory (overrides the derived one)

    Returns:
        ExtractionResult with the target directory and entry names

    Raises:
        NotFoundError: If the archive does not exist
        WriteFailedError: If the target directory cannot be created
        ExtractionFailedError: If the archive cannot be read or extracted
    """
    archive_path = Path(archive).expanduser().absolute()
    if not archive_path.is_file():
        raise NotFoundError(f"Zip file not found: {archive_path.name}", archive_path)

    if target_dir is None:
        target = Path(destination_root).expanduser().absolute() / archive_base_name(archive_path)
    else:
        target = Path(target_dir).expanduser().absolute()

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteFailedError(f"Could not create {target}: {e}") from e

    try:
        with zipfile.ZipFile(archive_path) as zf:
            entries = zf.namelist()
            zf.extractall(target)
    except Exception as e:
        # Corrupt members raise zlib.error or EOFError, not only BadZipFile
        raise ExtractionFailedError(f"Could not extract {archive_path.name}: {e}") from e

    logger.info(f"Entpackt: {archive_path} -> {target} ({len(entries)} Einträge)")
    return ExtractionResult(archive=archive_path, target_dir=target, entries=entries)
