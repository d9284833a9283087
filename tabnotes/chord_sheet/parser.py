"""Chord sheet import.

This module turns a plain-text chord sheet, with chord lines written above
lyric lines and ``[Section]`` headers, into song sections. Chords in a chord
line are anchored to the character offset of the lyric below them, which is
the inverse of the chord-over-lyric layout. Rendered tablature and whole
songs written by ``render_song`` are read back as well.
"""

from __future__ import annotations

import re

from tabnotes.chord_sheet.chord_detector import (
    classify_line,
    classify_tokens,
    extract_section_name,
)
from tabnotes.chord_sheet.tokenizer import tokenize_line
from tabnotes.layout import STRING_NAMES, is_tab_group, read_tab
from tabnotes.models import (
    Block,
    ChordPosition,
    ChordsBlock,
    ChordsLyricsBlock,
    Note,
    Section,
    Song,
    TabBlock,
    new_id,
)
from tabnotes.sheet import UNTITLED

# Section name for text that appears before any header
DEFAULT_SECTION = "Song"

DETAIL_PATTERNS = {
    "key": re.compile(r"Key: (.+)"),
    "tempo": re.compile(r"Tempo: (\d+) BPM"),
    "capo": re.compile(r"Capo: (\d+)"),
}


def preprocess(text: str) -> list[str]:
    """Normalize line endings and split into lines."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


class _BlockCollector:
    """Accumulates consecutive sheet lines into blocks."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.lyric_lines: list[str] = []
        self.positions: list[ChordPosition] = []
        self.chord_lines: list[str] = []

    def next_lyric_offset(self) -> int:
        return sum(len(line) + 1 for line in self.lyric_lines)

    def add_pair(self, chord_line: str, lyric_line: str) -> None:
        self.flush_chords()
        tokens = tokenize_line(chord_line)
        if tokens:
            # Chords hanging past the lyric end keep their column; the last
            # one lands on the line end
            lyric_line = lyric_line.ljust(tokens[-1].start)

        line_start = self.next_lyric_offset()
        for token in tokens:
            self.positions.append(ChordPosition(token.text, line_start + token.start))
        self.lyric_lines.append(lyric_line)

    def add_lyric(self, line: str) -> None:
        self.flush_chords()
        self.lyric_lines.append(line)

    def add_chords(self, line: str) -> None:
        self.flush_lyrics()
        self.chord_lines.append(line.rstrip())

    def flush_lyrics(self) -> None:
        if self.lyric_lines:
            self.blocks.append(
                ChordsLyricsBlock(
                    id=new_id(),
                    lyrics="\n".join(self.lyric_lines),
                    chord_positions=tuple(self.positions),
                )
            )
        self.lyric_lines = []
        self.positions = []

    def add_tab(self, notes: list[Note]) -> None:
        self.flush()
        self.blocks.append(TabBlock(id=new_id(), notes=tuple(notes)))

    def flush_chords(self) -> None:
        if self.chord_lines:
            self.blocks.append(
                ChordsBlock(id=new_id(), content="\n".join(self.chord_lines))
            )
        self.chord_lines = []

    def flush(self) -> None:
        self.flush_lyrics()
        self.flush_chords()


def parse_blocks(lines: list[str]) -> tuple[Block, ...]:
    """Group the lines of one section into blocks.

    Parameters
    ----------
    lines : list[str]
        Lines of a section, without headers.

    Returns
    -------
    tuple[Block, ...]
        A ``ChordsLyricsBlock`` per run of lyric lines (with chords from the
        chord lines above them) and a ``ChordsBlock`` per run of chord-only
        lines. Six rendered tablature lines become a ``TabBlock``. Blank
        lines end the current block.
    """
    collector = _BlockCollector()
    i = 0
    n = len(lines)

    while i < n:
        if is_tab_group(lines[i:]):
            collector.add_tab(read_tab(lines[i:]))
            i += len(STRING_NAMES)
            continue

        line = lines[i]
        line_type = classify_line(line, classify_tokens(tokenize_line(line)))

        if line_type == "empty":
            collector.flush()
            i += 1
            continue

        if line_type == "chord":
            if (
                i + 1 < n
                and not is_tab_group(lines[i + 1 :])
                and classify_line(lines[i + 1]) in ("lyric", "comment")
            ):
                collector.add_pair(line, lines[i + 1])
                i += 2
                continue

            collector.add_chords(line)
            i += 1
            continue

        # Lyric and comment lines are both kept as lyric text
        collector.add_lyric(line)
        i += 1

    collector.flush()
    return tuple(collector.blocks)


def parse_sheet(text: str) -> tuple[Section, ...]:
    """Parse a chord sheet into sections.

    Parameters
    ----------
    text : str
        The chord sheet text.

    Returns
    -------
    tuple[Section, ...]
        One section per ``[Header]``, preceded by a "Song" section when text
        appears before the first header.

    Examples
    --------
    >>> sections = parse_sheet("[Verse]\\nAm    G\\nHello world")
    >>> sections[0].name
    'Verse'
    >>> [(cp.chord, cp.position) for cp in sections[0].blocks[0].chord_positions]
    [('Am', 0), ('G', 6)]
    """
    sections: list[Section] = []
    current_name: str | None = None
    current_lines: list[str] = []

    def close_section() -> None:
        blocks = parse_blocks(current_lines)
        if current_name is not None or blocks:
            sections.append(
                Section(id=new_id(), name=current_name or DEFAULT_SECTION, blocks=blocks)
            )

    for line in preprocess(text):
        section_name = extract_section_name(line)
        if section_name is None:
            current_lines.append(line)
            continue

        close_section()
        current_name = section_name
        current_lines = []

    close_section()
    return tuple(sections)


def import_song(text: str, title: str = "", artist: str = "") -> Song:
    """Create a new song from chord sheet text."""
    return Song(id=new_id(), title=title, artist=artist, sections=parse_sheet(text))


def parse_details(line: str) -> dict[str, str] | None:
    """Parse a ``Key: G | Tempo: 96 BPM | Capo: 2`` header line.

    Returns None when any part of the line is not a known detail.

    Examples
    --------
    >>> parse_details("Key: G | Capo: 2")
    {'key': 'G', 'capo': '2'}
    >>> parse_details("The Beatles") is None
    True
    """
    details: dict[str, str] = {}
    for part in line.split(" | "):
        for name, pattern in DETAIL_PATTERNS.items():
            match = pattern.fullmatch(part)
            if match:
                details[name] = match.group(1)
                break
        else:
            return None
    return details


def parse_song_text(text: str) -> Song:
    """Read back a song written by :func:`tabnotes.sheet.render_song`.

    The lines before the first ``[Section]`` header are the title, the
    artist and the details line; the rest is parsed with
    :func:`parse_sheet`. Ids are new, and the tuning and favorite flag are
    not part of the text, so they take their defaults. Lyrics blocks come
    back as chords-lyrics blocks without chords, and empty tab blocks are
    not rendered so they do not come back.

    Examples
    --------
    >>> song = parse_song_text("Tune\\nBand\\nKey: G\\n\\n[Verse]\\n\\nAm\\nHello\\n")
    >>> (song.title, song.artist, song.key, song.sections[0].name)
    ('Tune', 'Band', 'G', 'Verse')
    """
    lines = preprocess(text)
    body_start = next(
        (i for i, line in enumerate(lines) if extract_section_name(line) is not None),
        len(lines),
    )
    header = [line for line in lines[:body_start] if line.strip()]

    title = header[0] if header else ""
    artist = ""
    details: dict[str, str] = {}
    for line in header[1:]:
        parsed = parse_details(line)
        if parsed is not None:
            details = parsed
        elif not artist:
            artist = line

    return Song(
        id=new_id(),
        title="" if title == UNTITLED else title,
        artist=artist,
        key=details.get("key", ""),
        tempo=int(details.get("tempo", 0)),
        capo=int(details.get("capo", 0)),
        sections=parse_sheet("\n".join(lines[body_start:])),
    )
