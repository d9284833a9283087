"""Song documents to and from JSON-compatible dictionaries.

The dictionary shape matches the song files written by earlier versions of
the application, so existing song libraries load unchanged:

- every block has ``id``, ``type`` and ``content`` (the text of chords,
  lyrics and chords-lyrics blocks);
- tab blocks add ``tabData``: ``[{"strings": {"1": "3"}}]``;
- chords-lyrics blocks add ``chordPositions``: ``[{"chord": "Am",
  "position": 6}]``.
"""

from __future__ import annotations

from typing import Any

from tabnotes.models import (
    BLOCK_TYPES,
    Block,
    ChordPosition,
    ChordsBlock,
    ChordsLyricsBlock,
    LyricsBlock,
    Note,
    Section,
    Song,
    SongMetadata,
    TabBlock,
)


class SongFormatError(ValueError):
    """Raised when a stored song document cannot be decoded."""


def note_to_dict(note: Note) -> dict[str, Any]:
    """Convert a Note to its stored form, strings in ascending order."""
    return {"strings": {str(s): note.frets[s] for s in sorted(note.frets)}}


def note_from_dict(data: dict[str, Any]) -> Note:
    strings = data.get("strings", {})
    try:
        return Note(frets={int(s): str(fret) for s, fret in strings.items()})
    except (AttributeError, TypeError, ValueError) as e:
        msg = f"Invalid tab note: {data!r}"
        raise SongFormatError(msg) from e


def chord_position_to_dict(cp: ChordPosition) -> dict[str, Any]:
    return {"chord": cp.chord, "position": cp.position}


def chord_position_from_dict(data: dict[str, Any]) -> ChordPosition:
    try:
        return ChordPosition(chord=str(data["chord"]), position=int(data["position"]))
    except (KeyError, TypeError, ValueError) as e:
        msg = f"Invalid chord position: {data!r}"
        raise SongFormatError(msg) from e


def block_to_dict(block: Block) -> dict[str, Any]:
    """Convert any Block variant to a JSON-serializable dict."""
    if isinstance(block, TabBlock):
        return {
            "id": block.id,
            "type": block.kind,
            "content": "",
            "tabData": [note_to_dict(note) for note in block.notes],
        }

    if isinstance(block, ChordsLyricsBlock):
        return {
            "id": block.id,
            "type": block.kind,
            "content": block.lyrics,
            "chordPositions": [
                chord_position_to_dict(cp) for cp in block.chord_positions
            ],
        }

    if isinstance(block, (ChordsBlock, LyricsBlock)):
        return {"id": block.id, "type": block.kind, "content": block.content}

    msg = f"Unsupported block type: {type(block).__name__}"
    raise TypeError(msg)


def block_from_dict(data: dict[str, Any]) -> Block:
    """Decode a stored block.

    Raises
    ------
    SongFormatError
        If the block type is unknown.
    """
    kind = data.get("type")
    block_id = str(data.get("id", ""))
    content = data.get("content") or ""

    if kind not in BLOCK_TYPES:
        msg = f"Unknown block type: {kind!r}"
        raise SongFormatError(msg)

    if kind == "tab":
        notes = tuple(note_from_dict(n) for n in data.get("tabData") or [])
        return TabBlock(id=block_id, notes=notes)

    if kind == "chords-lyrics":
        positions = tuple(
            chord_position_from_dict(cp) for cp in data.get("chordPositions") or []
        )
        return ChordsLyricsBlock(id=block_id, lyrics=content, chord_positions=positions)

    if kind == "chords":
        return ChordsBlock(id=block_id, content=content)

    return LyricsBlock(id=block_id, content=content)


def section_to_dict(section: Section) -> dict[str, Any]:
    return {
        "id": section.id,
        "name": section.name,
        "blocks": [block_to_dict(b) for b in section.blocks],
    }


def section_from_dict(data: dict[str, Any]) -> Section:
    return Section(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        blocks=tuple(block_from_dict(b) for b in data.get("blocks") or []),
    )


def song_to_dict(song: Song) -> dict[str, Any]:
    """Convert a Song to a JSON-serializable dict."""
    return {
        "id": song.id,
        "title": song.title,
        "artist": song.artist,
        "key": song.key,
        "tempo": song.tempo,
        "capo": song.capo,
        "tuning": song.tuning,
        "favorite": song.favorite,
        "sections": [section_to_dict(s) for s in song.sections],
    }


def song_from_dict(data: dict[str, Any]) -> Song:
    """Decode a stored song document.

    Missing descriptive fields fall back to the defaults of a new song.

    Raises
    ------
    SongFormatError
        If the document is not an object, has no id, or holds a malformed
        block.
    """
    if not isinstance(data, dict) or "id" not in data:
        msg = "Song document must be an object with an 'id'"
        raise SongFormatError(msg)

    try:
        return Song(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            artist=str(data.get("artist", "")),
            key=str(data.get("key", "")),
            tempo=int(data.get("tempo") or 0),
            capo=int(data.get("capo") or 0),
            tuning=str(data.get("tuning", "Standard")),
            favorite=bool(data.get("favorite", False)),
            sections=tuple(section_from_dict(s) for s in data.get("sections") or []),
        )
    except SongFormatError:
        raise
    except (AttributeError, TypeError, ValueError) as e:
        msg = f"Invalid song document {data.get('id')!r}: {e}"
        raise SongFormatError(msg) from e


def metadata_to_dict(metadata: SongMetadata) -> dict[str, Any]:
    return {"id": metadata.id, "title": metadata.title, "artist": metadata.artist}


def metadata_from_dict(data: dict[str, Any]) -> SongMetadata:
    """Decode an index record; older indexes have no artist."""
    return SongMetadata(
        id=str(data["id"]),
        title=str(data.get("title", "")),
        artist=str(data.get("artist", "")),
    )
