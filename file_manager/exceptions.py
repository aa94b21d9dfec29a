"""Custom exceptions for the file manager."""

from pathlib import Path


class FileManagerError(Exception):
    """Base exception for file manager errors."""
    pass


class MissingArgumentError(FileManagerError, ValueError):
    """Raised when a required tool argument is absent or empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class InvalidArgumentError(FileManagerError, ValueError):
    """Raised when a tool argument has an unusable value."""
    pass


class NotFoundError(FileManagerError, FileNotFoundError):
    """Raised when a referenced file or directory does not exist."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class EmptySetError(FileManagerError):
    """Raised when a search or selection yields nothing."""
    pass


class ExtractionFailedError(FileManagerError):
    """Raised when the archive library fails to extract an archive."""
    pass


class WriteFailedError(FileManagerError, OSError):
    """Raised when mkdir, rename or copy fails at the OS level."""
    pass


class UnknownToolError(FileManagerError, KeyError):
    """Raised when a tool name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")

    def __str__(self) -> str:
        return self.args[0]
