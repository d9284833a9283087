"""Song document data models.

This module defines the structures a song is made of: notes and chord
positions, the four block kinds, sections and the song itself.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Literal

BlockKind = Literal["tab", "chords", "lyrics", "chords-lyrics"]

# Guitar strings are numbered 1 (high e) to 6 (low E)
MIN_STRING = 1
MAX_STRING = 6


def new_id() -> str:
    """Return a fresh random identifier for songs, sections and blocks."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Note:
    """One column of tablature.

    Parameters
    ----------
    frets : Mapping[int, str]
        Fret labels keyed by string number (1-6). A string missing from the
        mapping is not played. Labels are kept verbatim as text.

    Examples
    --------
    >>> note = Note({1: "3", 2: "12"})
    >>> note.fret_for(2)
    '12'
    >>> note.fret_for(6) is None
    True
    """

    frets: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy of the caller's mapping
        object.__setattr__(self, "frets", MappingProxyType(dict(self.frets)))

    def __hash__(self) -> int:
        return hash(frozenset(self.frets.items()))

    def fret_for(self, string_number: int) -> str | None:
        """Return the fret label on a string, or None if it is not played."""
        return self.frets.get(string_number)


@dataclass(frozen=True)
class ChordPosition:
    """A chord label anchored at a character offset of the lyrics.

    Parameters
    ----------
    chord : str
        The chord label as displayed (e.g., "Am", "G7").
    position : int
        Zero-based character index into the lyrics string.
    """

    chord: str
    position: int


@dataclass(frozen=True)
class TabBlock:
    """A block of tablature notes."""

    kind: ClassVar[BlockKind] = "tab"

    id: str
    notes: tuple[Note, ...] = ()


@dataclass(frozen=True)
class ChordsBlock:
    """Free text chord progression (e.g., "Am  G  C")."""

    kind: ClassVar[BlockKind] = "chords"

    id: str
    content: str = ""


@dataclass(frozen=True)
class LyricsBlock:
    """Free text lyrics."""

    kind: ClassVar[BlockKind] = "lyrics"

    id: str
    content: str = ""


@dataclass(frozen=True)
class ChordsLyricsBlock:
    """Lyrics with chords anchored at character offsets.

    Parameters
    ----------
    id : str
        Block identifier.
    lyrics : str
        The lyrics text. Offsets in ``chord_positions`` index into it.
    chord_positions : tuple[ChordPosition, ...]
        Anchored chords, sorted by ascending position.
    """

    kind: ClassVar[BlockKind] = "chords-lyrics"

    id: str
    lyrics: str = ""
    chord_positions: tuple[ChordPosition, ...] = ()


Block = TabBlock | ChordsBlock | LyricsBlock | ChordsLyricsBlock

BLOCK_TYPES: dict[str, type[Block]] = {
    "tab": TabBlock,
    "chords": ChordsBlock,
    "lyrics": LyricsBlock,
    "chords-lyrics": ChordsLyricsBlock,
}


@dataclass(frozen=True)
class Section:
    """A named part of a song (e.g., "Verse 1", "Chorus")."""

    id: str
    name: str
    blocks: tuple[Block, ...] = ()


@dataclass(frozen=True)
class SongMetadata:
    """Index record kept alongside every stored song."""

    id: str
    title: str
    artist: str = ""


@dataclass(frozen=True)
class Song:
    """A complete song document.

    Parameters
    ----------
    id : str
        Storage key of the song.
    title, artist, key : str
        Descriptive fields shown in the song header.
    tempo : int
        Beats per minute, 0 when unset.
    capo : int
        Capo fret, 0 when unused.
    tuning : str
        Free text tuning name.
    favorite : bool
        Whether the song is starred in the song list.
    sections : tuple[Section, ...]
        The song body.
    """

    id: str
    title: str = ""
    artist: str = ""
    key: str = ""
    tempo: int = 0
    capo: int = 0
    tuning: str = "Standard"
    favorite: bool = False
    sections: tuple[Section, ...] = ()

    def metadata(self) -> SongMetadata:
        """Return the index record for this song."""
        return SongMetadata(id=self.id, title=self.title, artist=self.artist)
