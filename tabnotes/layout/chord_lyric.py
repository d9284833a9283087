"""Chord-over-lyric layout.

This module merges chords anchored at lyric character offsets into a chord
line positioned above each line of lyrics, for monospaced display.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from tabnotes.models import ChordPosition

# Extra cells past the end of a lyric line that chords may spill into
CHORD_SLACK = 20


@dataclass(frozen=True)
class LinePair:
    """One line of lyrics with the chords that sit above it.

    Parameters
    ----------
    chord_line : str | None
        The aligned chord line, or None when no chord falls on this line.
    lyric_line : str
        The lyric line, unchanged.
    """

    chord_line: str | None
    lyric_line: str

    def lines(self) -> Iterator[str]:
        """Yield the display rows, skipping an absent chord line."""
        if self.chord_line is not None:
            yield self.chord_line
        yield self.lyric_line


def chords_in_span(
    chord_positions: Sequence[ChordPosition], start: int, end: int
) -> list[ChordPosition]:
    """Select chords anchored within ``[start, end]``.

    The upper bound is inclusive, so a chord anchored on a line's trailing
    newline belongs to that line and not the next.
    """
    return [cp for cp in chord_positions if start <= cp.position <= end]


def build_chord_line(
    line: str,
    line_start: int,
    chords: Sequence[ChordPosition],
    slack: int | None = CHORD_SLACK,
) -> str:
    """Write chord labels into a space buffer aligned with a lyric line.

    Chords are written in the given order; where labels overlap, the chord
    written last wins.

    Parameters
    ----------
    line : str
        The lyric line the chords sit above.
    line_start : int
        Offset of the line's first character within the full lyrics.
    chords : Sequence[ChordPosition]
        Chords selected for this line, in ascending offset order.
    slack : int | None
        Cells available past the end of the line. Characters beyond them are
        dropped. None lets the buffer grow to fit every label.

    Returns
    -------
    str
        The chord line, at least as long as ``line``.

    Examples
    --------
    >>> build_chord_line("Hello world", 0, [ChordPosition("Am", 6)])
    '      Am   '
    """
    buffer = [" "] * (len(line) + (slack or 0))
    max_index = 0

    for cp in chords:
        offset = max(0, cp.position - line_start)
        for i, char in enumerate(cp.chord):
            index = offset + i
            if index >= len(buffer):
                if slack is not None:
                    continue
                buffer.extend(" " * (index + 1 - len(buffer)))
            buffer[index] = char
            max_index = max(max_index, index)

    return "".join(buffer[: max(len(line), max_index + 1)])


def render_chords_lyrics(
    lyrics: str,
    chord_positions: Sequence[ChordPosition],
    *,
    slack: int | None = CHORD_SLACK,
) -> list[LinePair]:
    """Lay out lyrics with their chords above each line.

    Parameters
    ----------
    lyrics : str
        The lyrics text, lines separated by ``\\n``.
    chord_positions : Sequence[ChordPosition]
        Anchored chords, sorted by ascending position.
    slack : int | None
        See :func:`build_chord_line`.

    Returns
    -------
    list[LinePair]
        One pair per lyric line; empty for empty lyrics.

    Examples
    --------
    >>> pairs = render_chords_lyrics("Hello world", [ChordPosition("Am", 6)])
    >>> [list(p.lines()) for p in pairs]
    [['      Am   ', 'Hello world']]
    """
    if not lyrics:
        return []

    pairs: list[LinePair] = []
    line_start = 0

    for line in lyrics.split("\n"):
        line_end = line_start + len(line)
        chords = chords_in_span(chord_positions, line_start, line_end)

        chord_line = (
            build_chord_line(line, line_start, chords, slack) if chords else None
        )
        pairs.append(LinePair(chord_line=chord_line, lyric_line=line))

        # +1 for the newline consumed by split
        line_start = line_end + 1

    return pairs
