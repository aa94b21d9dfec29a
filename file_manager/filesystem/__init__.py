"""File organization engine."""

from .types import FileRecord, Listing
from .locations import LocationResolver, DOWNLOADS, DOCUMENTS
from .finder import find_files_by_extension, normalize_suffix
from .naming import next_free_name
from .selection import pick_latest
from .lister import list_files, render_listing, format_size, format_timestamp
from .archive import extract_archive, archive_base_name, ExtractionResult
from .operations import (
    create_directory,
    ensure_directory,
    move_file,
    copy_file,
)

__all__ = [
    # Types
    "FileRecord",
    "Listing",
    "ExtractionResult",
    # Locations
    "LocationResolver",
    "DOWNLOADS",
    "DOCUMENTS",
    # Discovery
    "find_files_by_extension",
    "normalize_suffix",
    "pick_latest",
    "list_files",
    "render_listing",
    "format_size",
    "format_timestamp",
    # Operations
    "next_free_name",
    "extract_archive",
    "archive_base_name",
    "create_directory",
    "ensure_directory",
    "move_file",
    "copy_file",
]
