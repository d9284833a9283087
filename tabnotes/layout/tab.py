"""ASCII tablature layout.

This module lays out a sequence of notes as six dash-padded text lines, one
per guitar string, with every note column aligned across strings.
"""

from __future__ import annotations

from collections.abc import Sequence

from tabnotes.layout.padding import DASH, center_pad, dashes
from tabnotes.models import Note

# High to low; string number 1 maps to index 0
STRING_NAMES: tuple[str, ...] = ("e", "B", "G", "D", "A", "E")

BORDER = "|"
LEAD_IN = "--"
CLOSING = "--|"


def column_width(note: Note) -> int:
    """Return the content width of a note column.

    The widest fret label in the note sets the width for every string, so
    a two-digit fret widens the whole column.

    Examples
    --------
    >>> column_width(Note({1: "3"}))
    1
    >>> column_width(Note({1: "3", 2: "12"}))
    2
    >>> column_width(Note())
    1
    """
    return max([1, *(len(fret) for fret in note.frets.values())])


def render_cell(note: Note, string_number: int, width: int) -> str:
    """Render one string's cell of a note column.

    Parameters
    ----------
    note : Note
        The note being laid out.
    string_number : int
        The string (1-6).
    width : int
        Total cell width (one lead dash plus the column width).

    Returns
    -------
    str
        The centered fret label, or dashes if the string is not played.
    """
    fret = note.fret_for(string_number)
    if fret is None:
        return dashes(width)
    return center_pad(fret, width)


def render_tab(notes: Sequence[Note]) -> list[str]:
    """Lay out notes as six aligned tablature lines.

    Parameters
    ----------
    notes : Sequence[Note]
        Notes in playing order.

    Returns
    -------
    list[str]
        One line per string in ``STRING_NAMES`` order.

    Examples
    --------
    >>> render_tab([])[0]
    'e|---|'
    >>> render_tab([Note({1: "3"}), Note({2: "12"})])[:2]
    ['e|--3-------|', 'B|-----12---|']
    """
    if not notes:
        return [f"{name}{BORDER}---{BORDER}" for name in STRING_NAMES]

    lines = [f"{name}{BORDER}{LEAD_IN}" for name in STRING_NAMES]
    last = len(notes) - 1

    for index, note in enumerate(notes):
        width = 1 + column_width(note)

        for string_index in range(len(STRING_NAMES)):
            lines[string_index] += render_cell(note, string_index + 1, width)

        # Single dash between notes, none after the last one
        if index < last:
            lines = [line + dashes(1) for line in lines]

    return [line + CLOSING for line in lines]


def is_tab_group(lines: Sequence[str]) -> bool:
    """Return True if ``lines`` start with six rendered tablature lines.

    Examples
    --------
    >>> is_tab_group(render_tab([Note({1: "3"})]))
    True
    >>> is_tab_group(["e|--3--|", "Hello"])
    False
    """
    if len(lines) < len(STRING_NAMES):
        return False

    group = lines[: len(STRING_NAMES)]
    width = len(group[0])
    return all(
        len(line) == width
        and len(line) >= 3
        and line.startswith(f"{name}{BORDER}")
        and line.endswith(BORDER)
        for name, line in zip(STRING_NAMES, group)
    )


def read_tab(lines: Sequence[str]) -> list[Note]:
    """Recover notes from six lines produced by :func:`render_tab`.

    Every fret label of a note sits inside the span of its widest label,
    and neighbouring notes are always parted by dashes on every string, so
    each run of columns holding a label on any string is one note.

    Raises
    ------
    ValueError
        If ``lines`` is not a tablature group.

    Examples
    --------
    >>> read_tab(render_tab([Note({1: "3"}), Note({2: "12", 6: "0"})]))[1].frets[2]
    '12'
    """
    if not is_tab_group(lines):
        msg = "Expected six tablature lines in e, B, G, D, A, E order"
        raise ValueError(msg)

    bodies = [line[2:-1] for line in lines[: len(STRING_NAMES)]]
    occupied = [
        any(body[col] != DASH for body in bodies) for col in range(len(bodies[0]))
    ]

    notes: list[Note] = []
    col = 0
    while col < len(occupied):
        if not occupied[col]:
            col += 1
            continue

        start = col
        while col < len(occupied) and occupied[col]:
            col += 1

        frets: dict[int, str] = {}
        for string_index, body in enumerate(bodies):
            label = body[start:col].strip(DASH)
            if label:
                frets[string_index + 1] = label
        notes.append(Note(frets=frets))

    return notes
