"""Chord detection and line classification for chord sheets.

This module provides regex-based chord detection backed by pychord, and
functions to classify tokens and whole lines of a chord sheet.
"""

from __future__ import annotations

import re

from tabnotes.chord_sheet.models import LineType, Token
from tabnotes.chord_sheet.tokenizer import tokenize_line

# Constants for chord detection
MAX_CHORD_LENGTH = 15
CHORD_LINE_THRESHOLD = 0.6

# Matches: root (A-G), optional accidental (b/#), optional quality, optional slash bass
CHORD_RE = re.compile(
    r"^[A-G][b#]?"  # Root note with optional accidental
    r"(?:"
    r"m(?:aj)?(?:7|9|11|13)?|"  # minor variants: m, maj, maj7, m7, m9, etc.
    r"M(?:aj)?(?:7|9|11|13)?|"  # major variants: M, Maj, Maj7, M7, etc.
    r"dim(?:7)?|"  # diminished
    r"aug(?:7)?|"  # augmented
    r"sus[24]?(?:7)?|"  # suspended
    r"add[29]|"  # added tones
    r"m7-5|m7b5|"  # half-diminished
    r"mM7|mmaj7|"  # minor-major seventh
    r"6|7|9|11|13|5"  # extensions and power chord
    r")*"
    r"(?:/[A-G][b#]?)?$"  # Optional slash bass
)

SECTION_HEADER_RE = re.compile(r"^\s*\[(.+?)\]\s*$")
COMMENT_RE = re.compile(r"^\s*\(.+?\)\s*$")


def is_chord(text: str) -> bool:
    """Check if text is a chord name.

    Uses a regex pre-filter followed by pychord validation.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("C/E")
    True
    >>> is_chord("Hello")
    False
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return False

    if not CHORD_RE.match(text):
        return False

    from pychord import Chord as PyChord

    try:
        PyChord(text)
    except ValueError:
        return False
    return True


def classify_token(token: Token) -> Token:
    """Classify a single token as chord, word, punct, or other.

    Examples
    --------
    >>> classify_token(Token(text="Am", start=0, end=2)).kind
    'chord'
    >>> classify_token(Token(text="--", start=0, end=2)).kind
    'punct'
    """
    text = token.text

    if is_chord(text):
        kind = "chord"
    elif all(not c.isalnum() for c in text):
        kind = "punct"
    elif any(c.isalpha() for c in text):
        kind = "word"
    else:
        return token

    return Token(text=text, start=token.start, end=token.end, kind=kind)


def classify_tokens(tokens: list[Token]) -> list[Token]:
    """Classify all tokens in a list."""
    return [classify_token(t) for t in tokens]


def extract_section_name(line: str) -> str | None:
    """Return the section name of a ``[Header]`` line, or None.

    Examples
    --------
    >>> extract_section_name("[Verse 1]")
    'Verse 1'
    >>> extract_section_name("Hello world") is None
    True
    """
    match = SECTION_HEADER_RE.match(line)
    return match.group(1) if match else None


def classify_line(line: str, tokens: list[Token] | None = None) -> LineType:
    """Classify a line of a chord sheet.

    Parameters
    ----------
    line : str
        The line to classify.
    tokens : list[Token] | None
        Pre-classified tokens, or None to classify internally.

    Returns
    -------
    LineType
        "chord" when most tokens are chords and none are words; "lyric" for
        any other text.

    Examples
    --------
    >>> classify_line("")
    'empty'
    >>> classify_line("[Chorus]")
    'section_header'
    >>> classify_line("(repeat)")
    'comment'
    >>> classify_line("Am   G   C")
    'chord'
    >>> classify_line("Hello world")
    'lyric'
    """
    if not line.strip():
        return "empty"

    if SECTION_HEADER_RE.match(line):
        return "section_header"

    if COMMENT_RE.match(line):
        return "comment"

    if tokens is None:
        tokens = classify_tokens(tokenize_line(line))

    chord_count = sum(1 for t in tokens if t.kind == "chord")
    word_count = sum(1 for t in tokens if t.kind == "word")

    if (
        chord_count > 0
        and word_count == 0
        and chord_count / len(tokens) >= CHORD_LINE_THRESHOLD
    ):
        return "chord"

    return "lyric"
