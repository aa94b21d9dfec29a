"""Resolution of location tokens ("downloads", "documents/Icons", ...) to directories."""

import logging
from pathlib import Path

from ..settings import LocationRoots

logger = logging.getLogger(__name__)

DOWNLOADS = "downloads"
DOCUMENTS = "documents"

_SEPARATORS = ("/", "\\")


class LocationResolver:
    """
    Maps location tokens to absolute directories.

    Resolution is purely syntactic: nothing is checked for existence here,
    callers decide what a missing directory means for them.
    """

    def __init__(self, roots: LocationRoots):
        self.roots = roots
        self._keywords = {
            DOWNLOADS: roots.downloads,
            DOCUMENTS: roots.documents,
        }

    def resolve(self, token: str) -> Path:
        """
        Resolve a location token to an absolute path.

        Args:
            token: "downloads", "documents", "<keyword>/<subpath>" or any path

        Returns:
            Absolute Path
        """
        lowered = token.lower()
        if lowered in self._keywords:
            return self._keywords[lowered]

        for keyword, root in self._keywords.items():
            for sep in _SEPARATORS:
                prefix = keyword + sep
                if lowered.startswith(prefix):
                    return root / token[len(prefix):].lstrip("/\\")

        resolved = Path(token).expanduser().absolute()
        logger.debug(f"Location '{token}' treated as path: {resolved}")
        return resolved

    def is_reserved(self, token: str) -> bool:
        """Whether a token names one of the roots or a path below one."""
        lowered = token.lower()
        if lowered in self._keywords:
            return True
        return any(
            lowered.startswith(keyword + sep)
            for keyword in self._keywords
            for sep in _SEPARATORS
        )

    def resolve_folder(self, folder: str | None, default_root: Path | None = None) -> Path:
        """
        Resolve a destination folder argument.

        Plain relative names ("Icons", "Projects/Icons") are subfolders of
        ``default_root`` (the documents root unless given); reserved tokens and
        absolute paths go through :meth:`resolve`.
        """
        root = default_root if default_root is not None else self.roots.documents
        if not folder:
            return root
        if self.is_reserved(folder) or Path(folder).expanduser().is_absolute():
            return self.resolve(folder)
        return root / folder
