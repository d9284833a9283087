"""Column-aware tokenizer for chord sheets.

Chord lines only make sense against the columns of the lyric line below
them, so tokens keep the exact column they were found at.
"""

import re

from tabnotes.chord_sheet.models import Token

TOKEN_RE = re.compile(r"\S+")


def tokenize_line(line: str) -> list[Token]:
    """Split a line on whitespace, keeping each token's column span.

    Parameters
    ----------
    line : str
        A single line without its newline character.

    Returns
    -------
    list[Token]
        Unclassified tokens (kind "other") in column order.

    Examples
    --------
    >>> [(t.text, t.start, t.end) for t in tokenize_line("Am     G")]
    [('Am', 0, 2), ('G', 7, 8)]
    >>> tokenize_line("   ")
    []
    """
    return [
        Token(text=match.group(), start=match.start(), end=match.end())
        for match in TOKEN_RE.finditer(line)
    ]
