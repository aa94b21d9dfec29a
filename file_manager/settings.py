"""Settings configuration for the File Manager tool server."""

import os
from dataclasses import dataclass
from pathlib import Path


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name, str(default))
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {value}")


@dataclass(frozen=True)
class LocationRoots:
    """The two root directories every location token is resolved against."""
    downloads: Path
    documents: Path

    @classmethod
    def from_home(cls, home: Path | None = None) -> "LocationRoots":
        """Build roots below a home directory (defaults to the user's home)."""
        home = Path(home) if home is not None else Path.home()
        return cls(downloads=home / "Downloads", documents=home / "Documents")

    @classmethod
    def from_env(cls) -> "LocationRoots":
        """Load roots from environment variables, falling back to the home directory."""
        defaults = cls.from_home()
        return cls(
            downloads=Path(
                os.getenv("FILE_MANAGER_DOWNLOADS_DIR", str(defaults.downloads))
            ).expanduser().absolute(),
            documents=Path(
                os.getenv("FILE_MANAGER_DOCUMENTS_DIR", str(defaults.documents))
            ).expanduser().absolute(),
        )


@dataclass
class ListingSettings:
    """Default limits for directory listings."""
    list_limit: int = 20
    recent_limit: int = 10

    @classmethod
    def from_env(cls) -> "ListingSettings":
        """Load listing settings from environment variables."""
        return cls(
            list_limit=_int_from_env("FILE_MANAGER_LIST_LIMIT", 20),
            recent_limit=_int_from_env("FILE_MANAGER_RECENT_LIMIT", 10),
        )


@dataclass
class ServerSettings:
    """HTTP server configuration settings."""
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerSettings":
        """Load server settings from environment variables."""
        return cls(
            host=os.getenv("FILE_MANAGER_HOST", "127.0.0.1"),
            port=_int_from_env("FILE_MANAGER_PORT", 8000),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@dataclass
class Settings:
    """Main settings class combining all configuration."""
    roots: LocationRoots
    listing: ListingSettings
    server: ServerSettings

    @classmethod
    def from_env(cls) -> "Settings":
        """Load all settings from environment variables."""
        return cls(
            roots=LocationRoots.from_env(),
            listing=ListingSettings.from_env(),
            server=ServerSettings.from_env(),
        )


# Global settings instance
settings = Settings.from_env()
