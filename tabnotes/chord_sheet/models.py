"""Data models for chord sheet parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TokenKind = Literal["chord", "word", "punct", "other"]

LineType = Literal["chord", "lyric", "empty", "comment", "section_header"]


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited piece of a line with its column span.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.
    kind : TokenKind
        The token classification.

    Examples
    --------
    >>> token = Token(text="Am7", start=4, end=7, kind="chord")
    >>> token.end - token.start
    3
    """

    text: str
    start: int
    end: int
    kind: TokenKind = "other"
