"""File record and listing types."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class FileRecord:
    """Snapshot of a single file's metadata."""

    name: str
    path: Path
    size_bytes: int
    modified_at: float
    extension: str

    @classmethod
    def from_path(cls, path: str | Path) -> "FileRecord":
        """Stat a file and build its record."""
        path_obj = Path(path).absolute()
        stat = path_obj.stat()
        return cls(
            name=path_obj.name,
            path=path_obj,
            size_bytes=stat.st_size,
            modified_at=stat.st_mtime,
            extension=path_obj.suffix.lower().lstrip("."),
        )

    @property
    def modified_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.modified_at)


@dataclass
class Listing:
    """Sorted, filtered and truncated view of a directory."""

    directory: Path
    records: List[FileRecord] = field(default_factory=list)
    total: int = 0
    extension_filter: Optional[str] = None

    @property
    def shown(self) -> int:
        return len(self.records)

    @property
    def latest(self) -> Optional[FileRecord]:
        return self.records[0] if self.records else None
