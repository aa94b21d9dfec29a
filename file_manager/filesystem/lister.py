"""Directory listings sorted by modification time."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from ..exceptions import InvalidArgumentError, NotFoundError
from .types import FileRecord, Listing

logger = logging.getLogger(__name__)

KIB = 1024
MIB = 1024 * 1024


def format_size(size: int) -> str:
    """Format file size in human-readable format."""
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{size / KIB:.2f} KB"
    return f"{size / MIB:.2f} MB"


def format_timestamp(record: FileRecord) -> str:
    """Local date and time in the process locale's format (the CLI and API set it from the environment)."""
    return record.modified_datetime.strftime("%x %X")


def normalize_extension(extension: Optional[str]) -> Optional[str]:
    """'.ZIP' -> 'zip'; empty values mean no filter."""
    if not extension:
        return None
    extension = extension.strip().lower().lstrip(".")
    return extension or None


def list_files(
    directory: str | Path,
    extension_filter: Optional[str] = None,
    limit: int = 20,
) -> Listing:
    """
    List the files directly inside a directory, newest first.

    Args:
        directory: Directory to list (not recursive)
        extension_filter: Only keep files with this extension ("svg", ".SVG")
        limit: Maximum number of records to keep

    Returns:
        Listing with the truncated records and the total match count

    Raises:
        NotFoundError: If directory does not exist
        InvalidArgumentError: If limit is below 1
    """
    if limit < 1:
        raise InvalidArgumentError(f"limit must be at least 1, got: {limit}")

    path = Path(directory).expanduser().absolute()
    if not path.is_dir():
        raise NotFoundError(f"Directory not found: {path}", path)

    wanted = normalize_extension(extension_filter)
    records: List[FileRecord] = []

    with os.scandir(path) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=False):
                continue
            try:
                record = FileRecord.from_path(entry.path)
            except OSError as e:
                # Deleted between listing and stat
                logger.warning(f"Datei übersprungen {entry.path}: {e}")
                continue
            if wanted is not None and record.extension != wanted:
                continue
            records.append(record)

    # sorted() is stable, equal timestamps keep listing order
    records = sorted(records, key=lambda r: r.modified_at, reverse=True)

    return Listing(
        directory=path,
        records=records[:limit],
        total=len(records),
        extension_filter=wanted,
    )


def render_listing(listing: Listing, label: Optional[str] = None) -> str:
    """
    Render a listing as text.

    Args:
        listing: Result of :func:`list_files`
        label: What the files are called ("zip file(s)"), derived from the
            filter when omitted

    Returns:
        Multi-line text, newest file marked as most recent
    """
    if label is None:
        label = f"{listing.extension_filter.upper()} file(s)" if listing.extension_filter else "file(s)"

    if not listing.records:
        return f"No {label} found in {listing.directory}"

    lines = [
        f"Showing {listing.shown} of {listing.total} {label} in {listing.directory} "
        f"(most recent first):",
        "",
    ]
    for i, record in enumerate(listing.records, 1):
        line = f"{i}. {record.name} ({format_size(record.size_bytes)}) - {format_timestamp(record)}"
        if i == 1:
            line += "  <- most recent"
        lines.append(line)

    return "\n".join(lines)
