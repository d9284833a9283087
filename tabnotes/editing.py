"""Block and song editing operations.

Every function here takes a block or a song and returns a new one; nothing
is modified in place. Input validation for fret entry also lives here, so the
layout engines only ever see notes that passed it.
"""

from __future__ import annotations

import bisect
import re
from collections.abc import Mapping
from dataclasses import replace

from tabnotes.models import (
    MAX_STRING,
    MIN_STRING,
    Block,
    BlockKind,
    ChordPosition,
    ChordsBlock,
    ChordsLyricsBlock,
    LyricsBlock,
    Note,
    Section,
    Song,
    TabBlock,
    new_id,
)

MAX_FRET = 24

FRET_RE = re.compile(r"[0-9]+")


class InvalidFretError(ValueError):
    """Raised when fret input is not a number between 0 and MAX_FRET."""


def parse_fret_input(value: str) -> str | None:
    """Validate one string's fret entry.

    Parameters
    ----------
    value : str
        The raw text typed for a string.

    Returns
    -------
    str | None
        The fret label, verbatim, or None for empty input (string cleared).

    Raises
    ------
    InvalidFretError
        If the value is not made of digits or exceeds MAX_FRET.

    Examples
    --------
    >>> parse_fret_input("12")
    '12'
    >>> parse_fret_input("") is None
    True
    """
    if value == "":
        return None
    if not FRET_RE.fullmatch(value) or int(value) > MAX_FRET:
        msg = f"Fret must be a number from 0 to {MAX_FRET}, got {value!r}"
        raise InvalidFretError(msg)
    return value


def add_note(block: TabBlock, frets: Mapping[int, str]) -> TabBlock:
    """Append a note to a tab block.

    An empty mapping leaves the block unchanged.

    Raises
    ------
    ValueError
        If a string number is outside 1-6.
    """
    if not frets:
        return block

    for string_number in frets:
        if not MIN_STRING <= string_number <= MAX_STRING:
            msg = f"String number must be {MIN_STRING}-{MAX_STRING}, got {string_number}"
            raise ValueError(msg)

    note = Note(frets=dict(frets))
    return replace(block, notes=(*block.notes, note))


def _check_index(index: int, size: int, what: str) -> None:
    if not 0 <= index < size:
        msg = f"{what} index {index} out of range for {size} item(s)"
        raise IndexError(msg)


def delete_note(block: TabBlock, index: int) -> TabBlock:
    """Remove the note at ``index``.

    Raises
    ------
    IndexError
        If ``index`` is negative or past the last note.
    """
    _check_index(index, len(block.notes), "Note")
    notes = block.notes[:index] + block.notes[index + 1 :]
    return replace(block, notes=notes)


def clear_notes(block: TabBlock) -> TabBlock:
    """Remove every note from a tab block."""
    return replace(block, notes=())


def add_chord(block: ChordsLyricsBlock, chord: str, position: int) -> ChordsLyricsBlock:
    """Anchor a chord at a lyric offset, keeping positions sorted.

    The label is stripped; a blank label leaves the block unchanged. A chord
    added at an offset already in use goes after the existing ones, so it is
    drawn last.

    Examples
    --------
    >>> block = ChordsLyricsBlock(id="b", lyrics="Hello world")
    >>> block = add_chord(block, "G", 6)
    >>> block = add_chord(block, " Am ", 0)
    >>> [(cp.chord, cp.position) for cp in block.chord_positions]
    [('Am', 0), ('G', 6)]
    """
    label = chord.strip()
    if not label:
        return block

    positions = list(block.chord_positions)
    keys = [cp.position for cp in positions]
    positions.insert(bisect.bisect_right(keys, position), ChordPosition(label, position))
    return replace(block, chord_positions=tuple(positions))


def delete_chord(block: ChordsLyricsBlock, index: int) -> ChordsLyricsBlock:
    """Remove the chord at ``index`` of the sorted positions.

    Raises
    ------
    IndexError
        If ``index`` is negative or past the last chord.
    """
    _check_index(index, len(block.chord_positions), "Chord")
    positions = block.chord_positions[:index] + block.chord_positions[index + 1 :]
    return replace(block, chord_positions=positions)


def set_lyrics(block: ChordsLyricsBlock, lyrics: str) -> ChordsLyricsBlock:
    """Replace the lyrics text.

    Chord offsets are kept as they are and are not shifted to follow edits.
    """
    return replace(block, lyrics=lyrics)


def new_block(kind: BlockKind) -> Block:
    """Create an empty block of the given kind."""
    if kind == "tab":
        return TabBlock(id=new_id())
    if kind == "chords":
        return ChordsBlock(id=new_id())
    if kind == "lyrics":
        return LyricsBlock(id=new_id())
    if kind == "chords-lyrics":
        return ChordsLyricsBlock(id=new_id())
    msg = f"Unknown block kind: {kind!r}"
    raise ValueError(msg)


def new_section(name: str = "New Section") -> Section:
    """Create an empty section."""
    return Section(id=new_id(), name=name)


def block_text(block: Block) -> str:
    """Return the free text carried by a block ("" for tab blocks)."""
    if isinstance(block, TabBlock):
        return ""
    if isinstance(block, (ChordsBlock, LyricsBlock)):
        return block.content
    if isinstance(block, ChordsLyricsBlock):
        return block.lyrics
    msg = f"Unsupported block type: {type(block).__name__}"
    raise TypeError(msg)


def change_block_kind(block: Block, kind: BlockKind) -> Block:
    """Switch a block to another kind, keeping its id.

    Text moves across between the text-bearing kinds. A new tab block starts
    with no notes, and chord positions are dropped when leaving the
    chords-lyrics kind.
    """
    text = block_text(block)
    if block.kind == kind:
        return block

    if kind == "tab":
        return TabBlock(id=block.id)
    if kind == "chords":
        return ChordsBlock(id=block.id, content=text)
    if kind == "lyrics":
        return LyricsBlock(id=block.id, content=text)
    if kind == "chords-lyrics":
        return ChordsLyricsBlock(id=block.id, lyrics=text)
    msg = f"Unknown block kind: {kind!r}"
    raise ValueError(msg)


def _section_index(song: Song, section_id: str) -> int:
    for i, section in enumerate(song.sections):
        if section.id == section_id:
            return i
    msg = f"No section with id {section_id!r}"
    raise KeyError(msg)


def _with_section(song: Song, index: int, section: Section) -> Song:
    sections = song.sections[:index] + (section,) + song.sections[index + 1 :]
    return replace(song, sections=sections)


def add_section(song: Song, section: Section | None = None) -> Song:
    """Append a section, by default an empty "New Section"."""
    if section is None:
        section = new_section()
    return replace(song, sections=(*song.sections, section))


def remove_section(song: Song, section_id: str) -> Song:
    """Drop the section with ``section_id``.

    Raises
    ------
    KeyError
        If the song has no such section.
    """
    index = _section_index(song, section_id)
    return replace(song, sections=song.sections[:index] + song.sections[index + 1 :])


def rename_section(song: Song, section_id: str, name: str) -> Song:
    index = _section_index(song, section_id)
    return _with_section(song, index, replace(song.sections[index], name=name))


def add_block(song: Song, section_id: str, kind: BlockKind = "tab") -> Song:
    """Append an empty block of ``kind`` to a section.

    Examples
    --------
    >>> song = add_section(Song(id="s"), Section(id="v", name="Verse"))
    >>> song = add_block(song, "v", "lyrics")
    >>> [block.kind for block in song.sections[0].blocks]
    ['lyrics']
    """
    index = _section_index(song, section_id)
    section = song.sections[index]
    section = replace(section, blocks=(*section.blocks, new_block(kind)))
    return _with_section(song, index, section)


def replace_block(song: Song, section_id: str, index: int, block: Block) -> Song:
    """Put ``block`` in place of the block at ``index`` of a section.

    Raises
    ------
    KeyError
        If the song has no such section.
    IndexError
        If ``index`` is outside the section's blocks.
    """
    section_index = _section_index(song, section_id)
    section = song.sections[section_index]
    _check_index(index, len(section.blocks), "Block")
    blocks = section.blocks[:index] + (block,) + section.blocks[index + 1 :]
    return _with_section(song, section_index, replace(section, blocks=blocks))


def remove_block(song: Song, section_id: str, index: int) -> Song:
    """Drop the block at ``index`` of a section."""
    section_index = _section_index(song, section_id)
    section = song.sections[section_index]
    _check_index(index, len(section.blocks), "Block")
    blocks = section.blocks[:index] + section.blocks[index + 1 :]
    return _with_section(song, section_index, replace(section, blocks=blocks))
