"""Monospaced text layout for tablature and chord-over-lyric blocks.

Both engines are pure functions from annotation data to display lines. The
editor preview and the read-only viewer call the same functions, so what is
shown while editing is exactly what is shown when viewing.
"""

from tabnotes.layout.chord_lyric import (
    CHORD_SLACK,
    LinePair,
    build_chord_line,
    chords_in_span,
    render_chords_lyrics,
)
from tabnotes.layout.padding import center_pad, dashes
from tabnotes.layout.tab import (
    STRING_NAMES,
    column_width,
    is_tab_group,
    read_tab,
    render_tab,
)

__all__ = [
    "CHORD_SLACK",
    "STRING_NAMES",
    "LinePair",
    "build_chord_line",
    "center_pad",
    "chords_in_span",
    "column_width",
    "dashes",
    "is_tab_group",
    "read_tab",
    "render_chords_lyrics",
    "render_tab",
]
