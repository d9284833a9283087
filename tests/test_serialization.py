"""Tests for song document encoding."""

import json
from pathlib import Path
from typing import Any

import pytest

from tabnotes.models import (
    ChordPosition,
    ChordsBlock,
    ChordsLyricsBlock,
    LyricsBlock,
    Note,
    SongMetadata,
    TabBlock,
)
from tabnotes.serialization import (
    SongFormatError,
    block_from_dict,
    block_to_dict,
    metadata_from_dict,
    note_to_dict,
    song_from_dict,
    song_to_dict,
)

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"


@pytest.fixture
def saved_song() -> dict[str, Any]:
    """Load the saved_song.json fixture."""
    return json.loads((TESTDATA_DIR / "saved_song.json").read_text())


class TestSongFromDict:
    """Decoding tests against a stored song."""

    def test_fields(self, saved_song: dict[str, Any]) -> None:
        """Test the descriptive song fields."""
        song = song_from_dict(saved_song)
        assert song.title == "Practice Piece"
        assert song.artist == "Anon"
        assert (song.key, song.tempo, song.capo) == ("G", 96, 2)
        assert song.favorite is True
        assert [s.name for s in song.sections] == ["Intro", "Verse"]

    def test_block_variants(self, saved_song: dict[str, Any]) -> None:
        """Test that each stored type decodes to its block class."""
        song = song_from_dict(saved_song)
        intro, verse = song.sections
        tab, chords = intro.blocks
        chords_lyrics, lyrics = verse.blocks

        assert isinstance(tab, TabBlock)
        assert tab.notes[0] == Note({1: "3", 2: "0"})
        assert tab.notes[1].fret_for(3) == "12"
        assert chords == ChordsBlock(id="blk-chords", content="G  D  Em  C")
        assert isinstance(chords_lyrics, ChordsLyricsBlock)
        assert chords_lyrics.lyrics == "Hello world\nGoodbye moon"
        assert chords_lyrics.chord_positions[2] == ChordPosition("Am", 12)
        assert lyrics == LyricsBlock(id="blk-lyrics", content="la la la")

    def test_round_trip(self, saved_song: dict[str, Any]) -> None:
        """Test that encoding a decoded song gives back the stored data."""
        assert song_to_dict(song_from_dict(saved_song)) == saved_song

    def test_defaults_for_missing_fields(self) -> None:
        """Test that a minimal document fills in defaults."""
        song = song_from_dict({"id": "s1"})
        assert song.title == ""
        assert song.tuning == "Standard"
        assert song.sections == ()

    def test_missing_id(self) -> None:
        """Test that a document without an id is rejected."""
        with pytest.raises(SongFormatError, match="'id'"):
            song_from_dict({"title": "No id"})

    def test_not_an_object(self) -> None:
        """Test that a non-object document is rejected."""
        with pytest.raises(SongFormatError):
            song_from_dict([])  # type: ignore[arg-type]

    def test_malformed_section(self) -> None:
        """Test that malformed nested data raises a format error."""
        with pytest.raises(SongFormatError):
            song_from_dict({"id": "s1", "sections": ["oops"]})


class TestBlocks:
    """Block encoding tests."""

    def test_unknown_type(self) -> None:
        """Test that an unknown block type is rejected."""
        with pytest.raises(SongFormatError, match="Unknown block type"):
            block_from_dict({"id": "b", "type": "score"})

    def test_bad_chord_position(self) -> None:
        """Test that a chord position without an offset is rejected."""
        data = {"id": "b", "type": "chords-lyrics", "content": "Hi", "chordPositions": [{"chord": "A"}]}
        with pytest.raises(SongFormatError, match="Invalid chord position"):
            block_from_dict(data)

    def test_bad_tab_note(self) -> None:
        """Test that a note with a non-numeric string key is rejected."""
        data = {"id": "b", "type": "tab", "tabData": [{"strings": {"high": "3"}}]}
        with pytest.raises(SongFormatError, match="Invalid tab note"):
            block_from_dict(data)

    def test_missing_optional_lists(self) -> None:
        """Test blocks saved without tabData or chordPositions."""
        assert block_from_dict({"id": "t", "type": "tab", "content": ""}) == TabBlock(id="t")
        assert block_from_dict({"id": "c", "type": "chords-lyrics", "content": "la"}) == (
            ChordsLyricsBlock(id="c", lyrics="la")
        )

    def test_note_strings_sorted(self) -> None:
        """Test that string numbers are written in ascending order."""
        data = note_to_dict(Note({6: "0", 1: "3"}))
        assert list(data["strings"]) == ["1", "6"]

    def test_tab_block_shape(self) -> None:
        """Test the stored shape of a tab block."""
        block = TabBlock(id="t", notes=(Note({1: "3"}),))
        assert block_to_dict(block) == {
            "id": "t",
            "type": "tab",
            "content": "",
            "tabData": [{"strings": {"1": "3"}}],
        }

    def test_encode_rejects_other_types(self) -> None:
        """Test that non-block values are rejected."""
        with pytest.raises(TypeError):
            block_to_dict("block")  # type: ignore[arg-type]


class TestMetadata:
    """Index record tests."""

    def test_old_index_without_artist(self) -> None:
        """Test that index records without an artist still load."""
        assert metadata_from_dict({"id": "s", "title": "T"}) == SongMetadata("s", "T", "")
