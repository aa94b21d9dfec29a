"""File organization tools for agent integration.

Every tool takes a flat argument mapping (as sent by a tool-calling client)
and returns a :class:`ToolResult` with a single text payload. Failures never
escape :meth:`FileManagerTools.call`; they become error results.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .exceptions import (
    EmptySetError,
    FileManagerError,
    InvalidArgumentError,
    MissingArgumentError,
    NotFoundError,
    UnknownToolError,
    WriteFailedError,
)
from . import filesystem
from .filesystem import (
    LocationResolver,
    extract_archive,
    find_files_by_extension,
    format_size,
    pick_latest,
    render_listing,
)
from .filesystem.archive import ExtractionResult
from .filesystem.lister import format_timestamp
from .settings import LocationRoots, settings

logger = logging.getLogger(__name__)

SVG = ".svg"
ZIP = "zip"


@dataclass
class ToolResult:
    """Text payload returned to the transport layer."""
    text: str
    is_error: bool = False

    def to_content(self) -> Dict[str, Any]:
        """Serialize in the tool-call response shape."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


@dataclass
class ToolSpec:
    """Name, description and input schema of a tool."""
    name: str
    description: str
    properties: Dict[str, Dict[str, str]] = field(default_factory=dict)
    required: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": {
                "type": "object",
                "properties": self.properties,
                "required": self.required,
            },
        }


def _string(description: str) -> Dict[str, str]:
    return {"type": "string", "description": description}


def _number(description: str) -> Dict[str, str]:
    return {"type": "number", "description": description}


TOOL_SPECS = [
    ToolSpec(
        name="create_directory",
        description="Create a new folder in Documents, Downloads or any other location.",
        properties={
            "name": _string("Name of the folder to create (e.g., 'Projects' or 'Projects/Icons')"),
            "location": _string("Optional: Where to create it: 'documents' (default), 'downloads', 'documents/<sub>' or a path"),
        },
        required=["name"],
    ),
    ToolSpec(
        name="move_latest_svg",
        description="Find the most recently modified SVG file and move only that file to a folder in Documents.",
        properties={
            "destination_folder": _string("Subfolder in Documents where the SVG should go (e.g., 'Icons')"),
            "source": _string("Optional: Directory to search recursively (defaults to Downloads)"),
        },
        required=["destination_folder"],
    ),
    ToolSpec(
        name="copy_file",
        description="Copy a file to a folder in Documents without overwriting existing files.",
        properties={
            "filename": _string("Name of the file to copy (e.g., 'report.pdf')"),
            "destination_folder": _string("Optional: Subfolder in Documents (defaults to Documents itself)"),
            "source": _string("Optional: Where the file is: 'downloads' (default), 'documents' or a path"),
        },
        required=["filename"],
    ),
    ToolSpec(
        name="move_file",
        description="Move a file to a folder in Documents without overwriting existing files.",
        properties={
            "filename": _string("Name of the file to move (e.g., 'report.pdf')"),
            "destination_folder": _string("Optional: Subfolder in Documents (defaults to Documents itself)"),
            "source": _string("Optional: Where the file is: 'downloads' (default), 'documents' or a path"),
        },
        required=["filename"],
    ),
    ToolSpec(
        name="list_files",
        description="List files in a directory sorted by date (newest first), optionally filtered by extension.",
        properties={
            "directory": _string("Optional: Directory to list (defaults to 'downloads')"),
            "file_type": _string("Optional: Filter by file extension (e.g., 'zip', 'pdf', 'svg')"),
            "limit": _number("Optional: Maximum number of files to show (default: 20)"),
        },
    ),
    ToolSpec(
        name="unzip_file",
        description="Unzip a file from the Downloads directory into a folder named after the archive.",
        properties={
            "filename": _string("Name of the zip file in Downloads (e.g., 'archive.zip')"),
            "destination": _string("Optional: Where to extract files (defaults to Downloads). Use 'downloads', 'documents' or a path."),
        },
        required=["filename"],
    ),
    ToolSpec(
        name="unzip_and_move_svgs",
        description="Unzip a file from Downloads and move every SVG file it contained to a folder in Documents.",
        properties={
            "filename": _string("Name of the zip file in Downloads (e.g., 'project.zip')"),
            "destination_folder": _string("Subfolder in Documents where SVG files should go (e.g., 'DoorHanger')"),
        },
        required=["filename", "destination_folder"],
    ),
    ToolSpec(
        name="list_svg_files",
        description="List all SVG files in Downloads or a specified directory, including subfolders.",
        properties={
            "directory": _string("Optional: Directory to search (defaults to Downloads)"),
        },
    ),
    ToolSpec(
        name="move_svg_files",
        description="Find and move all SVG files from Downloads (or a source directory) to a folder in Documents.",
        properties={
            "source": _string("Optional: Directory to search recursively (defaults to Downloads)"),
            "subfolder": _string("Optional: Subfolder in Documents (e.g., 'Projects/Icons'), created if missing"),
        },
    ),
    ToolSpec(
        name="list_zip_files",
        description="List all zip files in the Downloads directory, sorted by date (newest first).",
        properties={
            "limit": _number("Optional: Maximum number of files to show (default: 10)"),
        },
    ),
    ToolSpec(
        name="list_recent_downloads",
        description="Show the most recently downloaded files in the Downloads directory.",
        properties={
            "limit": _number("Optional: Number of recent files to show (default: 10)"),
            "file_type": _string("Optional: Filter by file extension (e.g., 'zip', 'pdf', 'svg')"),
        },
    ),
    ToolSpec(
        name="unzip_latest",
        description="Unzip the most recently downloaded zip file from Downloads.",
        properties={
            "destination": _string("Optional: Where to extract files (defaults to Downloads). Use 'downloads', 'documents' or a path."),
        },
    ),
    ToolSpec(
        name="unzip_latest_and_move_svgs",
        description="Unzip the most recently downloaded zip file and move all SVG files to a folder in Documents.",
        properties={
            "destination_folder": _string("Subfolder in Documents where SVG files should go (e.g., 'Icons')"),
        },
        required=["destination_folder"],
    ),
]


def _checked(name: str, value: Any) -> str:
    text = str(value)
    if "\x00" in text:
        raise InvalidArgumentError(f"{name} must not contain a null byte")
    return text


def _require(args: Dict[str, Any], name: str) -> str:
    value = args.get(name)
    if value is None or not str(value).strip():
        raise MissingArgumentError(name)
    return _checked(name, value)


def _optional(args: Dict[str, Any], name: str, default: str = "") -> str:
    value = args.get(name)
    if value is None or not str(value).strip():
        return default
    return _checked(name, value)


def _limit(args: Dict[str, Any], default: int) -> int:
    value = args.get("limit")
    if value is None or value == "":
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"limit must be a number, got: {value!r}")
    if limit < 1:
        raise InvalidArgumentError(f"limit must be at least 1, got: {limit}")
    return limit


class FileManagerTools:
    """Registry and implementation of the file organization tools."""

    def __init__(
        self,
        roots: Optional[LocationRoots] = None,
        list_limit: Optional[int] = None,
        recent_limit: Optional[int] = None,
    ):
        """
        Args:
            roots: Downloads/documents roots (defaults to settings)
            list_limit: Default limit for list_files
            recent_limit: Default limit for list_zip_files and list_recent_downloads
        """
        self.roots = roots if roots is not None else settings.roots
        self.resolver = LocationResolver(self.roots)
        self.list_limit = list_limit if list_limit is not None else settings.listing.list_limit
        self.recent_limit = recent_limit if recent_limit is not None else settings.listing.recent_limit

        self._specs = {spec.name: spec for spec in TOOL_SPECS}
        self._handlers: Dict[str, Callable[[Dict[str, Any]], str]] = {
            name: getattr(self, name) for name in self._specs
        }

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def list_tools(self) -> List[Dict[str, Any]]:
        """Describe all tools with their input schemas."""
        return [spec.to_dict() for spec in self._specs.values()]

    def has_tool(self, name: str) -> bool:
        return name in self._handlers

    def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Run a tool and turn its outcome into a ToolResult.

        Empty searches are reported as normal results, every other
        FileManagerError (and any unexpected OSError) as an error result.
        """
        arguments = arguments or {}
        logger.info(f"Tool-Aufruf: {name} {arguments}")

        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)
            text = handler(arguments)
        except EmptySetError as e:
            logger.info(f"Tool '{name}': {e}")
            return ToolResult(text=str(e))
        except (FileManagerError, OSError, ValueError) as e:
            logger.error(f"Tool '{name}' fehlgeschlagen: {e}")
            return ToolResult(text=f"Error: {e}", is_error=True)

        return ToolResult(text=text)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def create_directory(self, args: Dict[str, Any]) -> str:
        name = _require(args, "name")
        location = _optional(args, "location", "documents")

        target = self.resolver.resolve(location) / name
        if not filesystem.create_directory(target):
            return f"Directory already exists: {target}"
        return f"Successfully created directory: {target}"

    def move_latest_svg(self, args: Dict[str, Any]) -> str:
        destination_folder = _require(args, "destination_folder")
        source_dir = self._source_dir(args)

        matches = list(find_files_by_extension(source_dir, SVG))
        if not matches:
            raise EmptySetError(f"No SVG files found in {source_dir}")

        latest = pick_latest(matches)
        dest_dir = self.resolver.resolve_folder(destination_folder)
        final_path = filesystem.move_file(latest.path, dest_dir)

        return (
            f"Successfully moved the most recent SVG file (out of {len(matches)}) to {dest_dir}\n\n"
            f"{latest.name} (modified {format_timestamp(latest)}) -> {final_path.name}"
        )

    def copy_file(self, args: Dict[str, Any]) -> str:
        source_path, dest_dir = self._transfer_paths(args)
        final_path = filesystem.copy_file(source_path, dest_dir)
        return self._transfer_message("copied", source_path, final_path)

    def move_file(self, args: Dict[str, Any]) -> str:
        source_path, dest_dir = self._transfer_paths(args)
        final_path = filesystem.move_file(source_path, dest_dir)
        return self._transfer_message("moved", source_path, final_path)

    def list_files(self, args: Dict[str, Any]) -> str:
        directory = self.resolver.resolve(_optional(args, "directory", "downloads"))
        listing = filesystem.list_files(
            directory,
            extension_filter=_optional(args, "file_type"),
            limit=_limit(args, self.list_limit),
        )
        return render_listing(listing)

    def unzip_file(self, args: Dict[str, Any]) -> str:
        filename = _require(args, "filename")
        result = extract_archive(self.roots.downloads / filename, self._extract_root(args))
        return self._extraction_message(result)

    def unzip_and_move_svgs(self, args: Dict[str, Any]) -> str:
        filename = _require(args, "filename")
        destination_folder = _require(args, "destination_folder")

        result = extract_archive(self.roots.downloads / filename, self.roots.downloads)
        return self._collect_svgs(result, destination_folder)

    def list_svg_files(self, args: Dict[str, Any]) -> str:
        search_dir = self._directory_or_downloads(args, "directory")

        matches = sorted(find_files_by_extension(search_dir, SVG))
        if not matches:
            raise EmptySetError(f"No SVG files found in {search_dir}")

        relative_paths = [str(path.relative_to(search_dir)) for path in matches]
        return f"Found {len(matches)} SVG file(s) in {search_dir}:\n\n" + "\n".join(relative_paths)

    def move_svg_files(self, args: Dict[str, Any]) -> str:
        source_dir = self._source_dir(args)
        dest_dir = self.resolver.resolve_folder(_optional(args, "subfolder"))

        matches = sorted(find_files_by_extension(source_dir, SVG))
        if not matches:
            raise EmptySetError(f"No SVG files found in {source_dir}")

        moved = self._move_all(matches, dest_dir)
        return (
            f"Successfully moved {len(moved)} SVG file(s) from {source_dir} to {dest_dir}\n\n"
            f"Moved files:\n" + "\n".join(path.name for path in moved)
        )

    def list_zip_files(self, args: Dict[str, Any]) -> str:
        listing = filesystem.list_files(self.roots.downloads, ZIP, _limit(args, self.recent_limit))
        return render_listing(listing, label="zip file(s)")

    def list_recent_downloads(self, args: Dict[str, Any]) -> str:
        listing = filesystem.list_files(
            self.roots.downloads,
            extension_filter=_optional(args, "file_type"),
            limit=_limit(args, self.recent_limit),
        )
        return render_listing(listing)

    def unzip_latest(self, args: Dict[str, Any]) -> str:
        archive = self._latest_zip()
        result = extract_archive(archive, self._extract_root(args))
        return self._extraction_message(result)

    def unzip_latest_and_move_svgs(self, args: Dict[str, Any]) -> str:
        destination_folder = _require(args, "destination_folder")
        archive = self._latest_zip()

        result = extract_archive(archive, self.roots.downloads)
        return self._collect_svgs(result, destination_folder)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _directory_or_downloads(self, args: Dict[str, Any], name: str) -> Path:
        token = _optional(args, name)
        return self.resolver.resolve(token) if token else self.roots.downloads

    def _source_dir(self, args: Dict[str, Any]) -> Path:
        return self._directory_or_downloads(args, "source")

    def _extract_root(self, args: Dict[str, Any]) -> Path:
        return self._directory_or_downloads(args, "destination")

    def _transfer_paths(self, args: Dict[str, Any]):
        filename = _require(args, "filename")
        source_dir = self.resolver.resolve(_optional(args, "source", "downloads"))
        source_path = source_dir / filename

        if not source_path.is_file():
            raise NotFoundError(f"File not found: {source_path}", source_path)

        dest_dir = self.resolver.resolve_folder(_optional(args, "destination_folder"))
        return source_path, dest_dir

    @staticmethod
    def _transfer_message(verb: str, source_path: Path, final_path: Path) -> str:
        message = f"Successfully {verb} {source_path.name} from {source_path.parent} to {final_path}"
        if final_path.name != source_path.name:
            message += f"\n\n{source_path.name} already existed there, saved as {final_path.name}"
        return message

    def _latest_zip(self) -> Path:
        downloads = self.roots.downloads
        if not downloads.is_dir():
            raise NotFoundError(f"Directory not found: {downloads}", downloads)

        zips = [
            path for path in downloads.iterdir()
            if path.is_file() and path.suffix.lower() == "." + ZIP
        ]
        if not zips:
            raise EmptySetError(f"No zip files found in {self.roots.downloads}")
        latest = pick_latest(sorted(zips))
        logger.info(f"Neueste Zip-Datei: {latest.name} ({format_size(latest.size_bytes)})")
        return latest.path

    def _move_all(self, paths: List[Path], dest_dir: Path) -> List[Path]:
        """Move files one by one; stop at the first failure and leave moved files in place."""
        moved: List[Path] = []
        for path in paths:
            try:
                moved.append(filesystem.move_file(path, dest_dir))
            except (NotFoundError, WriteFailedError) as e:
                already = ", ".join(p.name for p in moved) or "none"
                raise WriteFailedError(
                    f"Failed to move {path.name} after moving {len(moved)} file(s) "
                    f"(already moved: {already}): {e}"
                ) from e
        return moved

    def _collect_svgs(self, result: ExtractionResult, destination_folder: str) -> str:
        matches = sorted(find_files_by_extension(result.target_dir, SVG))
        if not matches:
            return (
                f"Successfully unzipped {result.archive.name} ({len(result.entries)} files) "
                f"to {result.target_dir}\n\nBut no SVG files were found in the archive."
            )

        dest_dir = self.resolver.resolve_folder(destination_folder)
        moved = self._move_all(matches, dest_dir)
        return (
            f"Success!\n\n"
            f"1. Unzipped {result.archive.name} ({len(result.entries)} total files)\n"
            f"2. Found {len(matches)} SVG file(s)\n"
            f"3. Moved all SVGs to {dest_dir}\n\n"
            f"Moved files:\n" + "\n".join(path.name for path in moved)
        )

    @staticmethod
    def _extraction_message(result: ExtractionResult) -> str:
        return (
            f"Successfully unzipped {result.archive.name} to {result.target_dir}\n\n"
            f"Extracted {len(result.entries)} files:\n" + "\n".join(result.entries)
        )
