"""JSON-file-per-song storage.

Each song lives in ``<root>/<id>.json``; a flat ``<root>/index.json`` lists
``{"id", "title", "artist"}`` for every song and is rewritten on each save
and delete. There is no locking: the store assumes a single writer.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from tabnotes.config import StorageRoot
from tabnotes.models import Song, SongMetadata
from tabnotes.serialization import (
    SongFormatError,
    metadata_from_dict,
    metadata_to_dict,
    song_from_dict,
    song_to_dict,
)

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


class SongStore:
    """Whole-document song store rooted at an explicit directory.

    Parameters
    ----------
    root : StorageRoot
        Where song files and the index live.

    Examples
    --------
    >>> import tempfile
    >>> store = SongStore(StorageRoot(Path(tempfile.mkdtemp())))
    >>> store.save_song(Song(id="s1", title="Wonderwall"))
    >>> [m.title for m in store.list_songs()]
    ['Wonderwall']
    """

    def __init__(self, root: StorageRoot) -> None:
        self.root = root

    def ensure_root(self) -> None:
        """Create the data directory and an empty index if missing."""
        self.root.path.mkdir(parents=True, exist_ok=True)
        if not self.root.index_file.exists():
            _write_json(self.root.index_file, [])

    def list_songs(self) -> list[SongMetadata]:
        """Return the index records in stored order."""
        self.ensure_root()
        data = json.loads(self.root.index_file.read_text(encoding="utf-8"))
        return [metadata_from_dict(entry) for entry in data]

    def _write_index(self, entries: list[SongMetadata]) -> None:
        _write_json(self.root.index_file, [metadata_to_dict(m) for m in entries])

    def get_song(self, song_id: str) -> Song | None:
        """Load a song, or return None if it is missing or unreadable."""
        self.ensure_root()
        path = self.root.song_file(song_id)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return song_from_dict(data)
        except FileNotFoundError:
            logger.error("Song %s not found in %s", song_id, self.root.path)
            return None
        except (OSError, SongFormatError, json.JSONDecodeError) as e:
            logger.error("Error reading song %s: %s", song_id, e)
            return None

    def save_song(self, song: Song) -> None:
        """Write the song file, then add or update its index record."""
        self.ensure_root()
        _write_json(self.root.song_file(song.id), song_to_dict(song))

        entries = self.list_songs()
        metadata = song.metadata()
        for i, entry in enumerate(entries):
            if entry.id == song.id:
                entries[i] = metadata
                break
        else:
            entries.append(metadata)

        self._write_index(entries)
        logger.debug("Saved song %s (%r)", song.id, song.title)

    def delete_song(self, song_id: str) -> None:
        """Remove the song file, then drop its index record.

        A missing song file is logged and the index is still updated.
        """
        self.ensure_root()
        try:
            self.root.song_file(song_id).unlink()
        except OSError as e:
            logger.warning("Failed to delete file for song %s: %s", song_id, e)

        entries = [m for m in self.list_songs() if m.id != song_id]
        self._write_index(entries)
        logger.debug("Deleted song %s", song_id)

    def migrate(self, new_root: StorageRoot) -> SongStore:
        """Move every file of this store into ``new_root``.

        The old directory is removed when it ends up empty. Returns a store
        for the new location; nothing is moved if the old directory does
        not exist.
        """
        old_path = self.root.path
        if not old_path.exists():
            logger.info("No existing data to migrate from %s", old_path)
            return SongStore(new_root)

        new_root.path.mkdir(parents=True, exist_ok=True)
        for item in old_path.iterdir():
            # shutil.move falls back to copy and delete across filesystems
            shutil.move(str(item), str(new_root.path / item.name))

        try:
            old_path.rmdir()
        except OSError:
            logger.debug("Leaving non-empty directory %s in place", old_path)

        logger.info("Migrated data from %s to %s", old_path, new_root.path)
        return SongStore(new_root)
