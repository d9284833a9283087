"""Plain-text chord sheet import.

This package parses chord sheets (chord lines written above lyric lines,
with optional ``[Section]`` headers) into song sections whose chords are
anchored at lyric character offsets.
"""

from tabnotes.chord_sheet.chord_detector import classify_line, is_chord
from tabnotes.chord_sheet.models import LineType, Token, TokenKind
from tabnotes.chord_sheet.parser import (
    import_song,
    parse_blocks,
    parse_sheet,
    parse_song_text,
)
from tabnotes.chord_sheet.tokenizer import tokenize_line

__all__ = [
    "LineType",
    "Token",
    "TokenKind",
    "classify_line",
    "import_song",
    "is_chord",
    "parse_blocks",
    "parse_sheet",
    "parse_song_text",
    "tokenize_line",
]
