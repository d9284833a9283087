"""Song notes for musicians, rendered as monospaced text.

Songs are made of sections holding tablature, chord, lyric and
chord-over-lyric blocks. This library lays those blocks out as aligned
ASCII text and stores songs as one JSON file each.

Examples
--------
>>> from tabnotes import ChordPosition, Note, render_chords_lyrics, render_tab

>>> # Tablature: one column per note, wide frets widen the whole column
>>> render_tab([Note({1: "3"}), Note({2: "12"})])[:2]
['e|--3-------|', 'B|-----12---|']

>>> # Chords sit above the lyric character they are anchored to
>>> pair = render_chords_lyrics("Hello world", [ChordPosition("Am", 6)])[0]
>>> pair.chord_line
'      Am   '
"""

from tabnotes.chord_sheet import import_song, parse_sheet, parse_song_text
from tabnotes.config import AppSettings, SettingsStore, StorageRoot
from tabnotes.editing import (
    InvalidFretError,
    add_block,
    add_chord,
    add_note,
    add_section,
    change_block_kind,
    clear_notes,
    delete_chord,
    delete_note,
    new_block,
    new_section,
    parse_fret_input,
    remove_block,
    remove_section,
    rename_section,
    replace_block,
    set_lyrics,
)
from tabnotes.layout import (
    STRING_NAMES,
    LinePair,
    center_pad,
    read_tab,
    render_chords_lyrics,
    render_tab,
)
from tabnotes.models import (
    Block,
    ChordPosition,
    ChordsBlock,
    ChordsLyricsBlock,
    LyricsBlock,
    Note,
    Section,
    Song,
    SongMetadata,
    TabBlock,
)
from tabnotes.serialization import SongFormatError, song_from_dict, song_to_dict
from tabnotes.sheet import preview_block, render_song, view_block
from tabnotes.storage import SongStore

__all__ = [
    "STRING_NAMES",
    "AppSettings",
    "Block",
    "ChordPosition",
    "ChordsBlock",
    "ChordsLyricsBlock",
    "InvalidFretError",
    "LinePair",
    "LyricsBlock",
    "Note",
    "Section",
    "SettingsStore",
    "Song",
    "SongFormatError",
    "SongMetadata",
    "SongStore",
    "StorageRoot",
    "TabBlock",
    "add_block",
    "add_chord",
    "add_note",
    "add_section",
    "center_pad",
    "change_block_kind",
    "clear_notes",
    "delete_chord",
    "delete_note",
    "import_song",
    "new_block",
    "new_section",
    "parse_fret_input",
    "parse_sheet",
    "parse_song_text",
    "preview_block",
    "read_tab",
    "remove_block",
    "remove_section",
    "rename_section",
    "render_chords_lyrics",
    "render_song",
    "render_tab",
    "replace_block",
    "set_lyrics",
    "song_from_dict",
    "song_to_dict",
    "view_block",
]
