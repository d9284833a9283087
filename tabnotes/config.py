"""Storage location and application settings.

The song store never looks up its location on its own: callers build a
``StorageRoot`` (usually from the settings file) and pass it in, so tests
and tools can point a store at any directory.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

APP_DIR_ENV = "TABNOTES_HOME"
SETTINGS_FILENAME = "settings.json"
DATA_DIRNAME = "data"
INDEX_FILENAME = "index.json"


@dataclass(frozen=True)
class StorageRoot:
    """Directory holding one JSON file per song plus the song index.

    Parameters
    ----------
    path : Path
        The data directory.

    Examples
    --------
    >>> root = StorageRoot(Path("/tmp/songs"))
    >>> root.song_file("abc").name
    'abc.json'
    >>> root.index_file.name
    'index.json'
    """

    path: Path

    @property
    def index_file(self) -> Path:
        return self.path / INDEX_FILENAME

    def song_file(self, song_id: str) -> Path:
        return self.path / f"{song_id}.json"


@dataclass(frozen=True)
class AppSettings:
    """User settings.

    Parameters
    ----------
    storage_path : Path | None
        Custom song directory, or None for the default under the app dir.
    disable_save_warning : bool
        Whether to skip the unsaved-changes prompt.
    """

    storage_path: Path | None = None
    disable_save_warning: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "storagePath": str(self.storage_path) if self.storage_path else None,
            "disableSaveWarning": self.disable_save_warning,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppSettings:
        """Build settings from stored keys, defaulting any that are missing."""
        defaults = cls()
        storage_path = data.get("storagePath", defaults.storage_path)
        return cls(
            storage_path=Path(storage_path) if storage_path else None,
            disable_save_warning=bool(
                data.get("disableSaveWarning", defaults.disable_save_warning)
            ),
        )


def default_app_dir() -> Path:
    """Return the application directory (``$TABNOTES_HOME`` or ``~/.tabnotes``)."""
    env = os.environ.get(APP_DIR_ENV)
    return Path(env) if env else Path.home() / ".tabnotes"


def resolve_storage_root(settings: AppSettings, app_dir: Path) -> StorageRoot:
    """Pick the configured song directory, or ``<app_dir>/data``."""
    return StorageRoot(settings.storage_path or app_dir / DATA_DIRNAME)


class SettingsStore:
    """Reads and writes ``AppSettings`` as a JSON file."""

    def __init__(self, settings_file: Path) -> None:
        self.settings_file = settings_file

    @classmethod
    def in_dir(cls, app_dir: Path) -> SettingsStore:
        return cls(app_dir / SETTINGS_FILENAME)

    def load(self) -> AppSettings:
        """Load settings, creating the file with defaults when absent.

        An unreadable file is logged and the defaults are returned.
        """
        if not self.settings_file.exists():
            self.save(AppSettings())
            return AppSettings()

        try:
            data = json.loads(self.settings_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Error reading settings %s: %s", self.settings_file, e)
            return AppSettings()

        if not isinstance(data, dict):
            logger.error("Ignoring malformed settings file %s", self.settings_file)
            return AppSettings()

        known = {"storagePath", "disableSaveWarning"}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown settings keys: %s", ", ".join(unknown))

        return AppSettings.from_dict(data)

    def save(self, settings: AppSettings) -> None:
        """Write settings to disk, creating the parent directory."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        self.settings_file.write_text(
            json.dumps(settings.to_dict(), indent=2), encoding="utf-8"
        )
        logger.debug("Saved settings to %s", self.settings_file)
