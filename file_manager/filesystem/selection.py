"""Selection of the most recently modified file."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..exceptions import EmptySetError
from .types import FileRecord

logger = logging.getLogger(__name__)


def pick_latest(files: Iterable[FileRecord | str | Path]) -> FileRecord:
    """
    Pick the file with the greatest modification time.

    Ties go to the file seen first, so repeated calls on the same input
    always return the same file.

    Args:
        files: FileRecords or paths (paths are stat'ed)

    Returns:
        FileRecord of the latest file

    Raises:
        EmptySetError: If ``files`` is empty
    """
    latest: Optional[FileRecord] = None
    for item in files:
        record = item if isinstance(item, FileRecord) else FileRecord.from_path(item)
        # Strictly greater keeps the first of equal timestamps
        if latest is None or record.modified_at > latest.modified_at:
            latest = record

    if latest is None:
        raise EmptySetError("No files to choose from")

    logger.debug(f"Neueste Datei: {latest.path}")
    return latest
