"""Plain-text presentation of blocks and songs.

The editor preview and the song viewer both build their rows here from the
same layout engines. The only difference between them is that the viewer
hides a tab block with no notes, while the preview shows its empty border.
"""

from __future__ import annotations

from tabnotes.layout import render_chords_lyrics, render_tab
from tabnotes.models import (
    Block,
    ChordsBlock,
    ChordsLyricsBlock,
    LyricsBlock,
    Song,
    TabBlock,
)

UNTITLED = "Untitled"


def _text_lines(content: str) -> list[str]:
    return content.split("\n") if content else []


def preview_block(block: Block) -> list[str]:
    """Return the editor preview rows for a block.

    Examples
    --------
    >>> preview_block(TabBlock(id="t"))[0]
    'e|---|'
    """
    if isinstance(block, TabBlock):
        return render_tab(block.notes)
    if isinstance(block, ChordsLyricsBlock):
        pairs = render_chords_lyrics(block.lyrics, block.chord_positions)
        return [row for pair in pairs for row in pair.lines()]
    if isinstance(block, (ChordsBlock, LyricsBlock)):
        return _text_lines(block.content)
    msg = f"Unsupported block type: {type(block).__name__}"
    raise TypeError(msg)


def view_block(block: Block) -> list[str]:
    """Return the read-only viewer rows for a block.

    Examples
    --------
    >>> view_block(TabBlock(id="t"))
    []
    """
    if isinstance(block, TabBlock) and not block.notes:
        return []
    return preview_block(block)


def song_header(song: Song) -> list[str]:
    """Return the title, artist and details rows of a song."""
    header = [song.title or UNTITLED]
    if song.artist:
        header.append(song.artist)

    details = []
    if song.key:
        details.append(f"Key: {song.key}")
    if song.tempo > 0:
        details.append(f"Tempo: {song.tempo} BPM")
    if song.capo > 0:
        details.append(f"Capo: {song.capo}")
    if details:
        header.append(" | ".join(details))

    return header


def render_song(song: Song) -> str:
    """Render a whole song as monospaced text.

    Sections are written as ``[Name]`` headers, the same convention the
    chord sheet importer reads, and blocks are separated by blank lines.

    Parameters
    ----------
    song : Song
        The song to render.

    Returns
    -------
    str
        The song text, ending with a newline.
    """
    out: list[str] = song_header(song)

    for section in song.sections:
        out.append("")
        out.append(f"[{section.name}]")

        for block in section.blocks:
            rows = view_block(block)
            if not rows:
                continue
            out.append("")
            out.extend(rows)

    return "\n".join(out) + "\n"
