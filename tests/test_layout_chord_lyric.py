"""Tests for the chord-over-lyric layout engine."""

from tabnotes.layout.chord_lyric import (
    CHORD_SLACK,
    LinePair,
    build_chord_line,
    chords_in_span,
    render_chords_lyrics,
)
from tabnotes.models import ChordPosition


class TestRenderNoChords:
    """Test lyrics without chords."""

    def test_empty_lyrics(self) -> None:
        """Test that empty lyrics produce no lines."""
        assert render_chords_lyrics("", []) == []

    def test_empty_lyrics_ignores_chords(self) -> None:
        """Test that chords on empty lyrics produce no lines."""
        assert render_chords_lyrics("", [ChordPosition("Am", 0)]) == []

    def test_lines_without_chords(self) -> None:
        """Test that each lyric line gets a pair with no chord line."""
        pairs = render_chords_lyrics("Hello\nWorld", [])
        assert pairs == [
            LinePair(chord_line=None, lyric_line="Hello"),
            LinePair(chord_line=None, lyric_line="World"),
        ]

    def test_lines_skip_absent_chord_line(self) -> None:
        """Test that display rows omit the absent chord line."""
        pairs = render_chords_lyrics("Hello", [])
        assert list(pairs[0].lines()) == ["Hello"]


class TestRenderChords:
    """Test chord placement."""

    def test_simple_chord(self) -> None:
        """Test a chord anchored at the start of a word."""
        pairs = render_chords_lyrics("Hello world", [ChordPosition("Am", 6)])
        assert len(pairs) == 1
        assert pairs[0].chord_line == "      Am   "
        assert pairs[0].chord_line.index("Am") == 6
        assert pairs[0].lyric_line == "Hello world"
        assert list(pairs[0].lines()) == ["      Am   ", "Hello world"]

    def test_chord_on_second_line(self) -> None:
        """Test that offsets count the newline of earlier lines."""
        pairs = render_chords_lyrics("Hello\nWorld", [ChordPosition("G", 6)])
        assert pairs[0].chord_line is None
        assert pairs[1].chord_line == "G    "

    def test_trailing_edge_belongs_to_line(self) -> None:
        """Test that a chord at a line's end offset stays on that line."""
        pairs = render_chords_lyrics("ab\ncd", [ChordPosition("X", 2)])
        assert pairs[0].chord_line == "  X"
        assert pairs[1].chord_line is None

    def test_chord_on_empty_line(self) -> None:
        """Test a chord anchored on an empty lyric line."""
        pairs = render_chords_lyrics("a\n\nb", [ChordPosition("G", 2)])
        assert pairs[1] == LinePair(chord_line="G", lyric_line="")

    def test_chord_line_covers_lyric(self) -> None:
        """Test that the chord line is never shorter than the lyric line."""
        lyrics = "Twinkle twinkle little star\nHow I wonder"
        chords = [ChordPosition("C", 0), ChordPosition("F", 16), ChordPosition("G", 32)]
        for pair in render_chords_lyrics(lyrics, chords):
            if pair.chord_line is not None:
                assert len(pair.chord_line) >= len(pair.lyric_line)

    def test_chord_overruns_short_line(self) -> None:
        """Test that a chord past the end of the line extends the chord line."""
        pairs = render_chords_lyrics("Hi", [ChordPosition("Cmaj7", 2)])
        assert pairs[0].chord_line == "  Cmaj7"

    def test_overlapping_chords_last_write_wins(self) -> None:
        """Test that the later chord at the same offset overwrites the earlier."""
        chords = [ChordPosition("Cmaj7", 0), ChordPosition("D", 0)]
        pairs = render_chords_lyrics("Hello world", chords)
        assert pairs[0].chord_line == "Dmaj7      "

    def test_idempotent(self) -> None:
        """Test that rendering twice gives identical output."""
        chords = [ChordPosition("C", 0), ChordPosition("G", 8)]
        lyrics = "Row row row\nyour boat"
        assert render_chords_lyrics(lyrics, chords) == render_chords_lyrics(lyrics, chords)


class TestChordSlack:
    """Test the overrun buffer."""

    def test_long_label_truncated(self) -> None:
        """Test that labels past the slack are cut off."""
        label = "X" * 30
        pairs = render_chords_lyrics("Hi", [ChordPosition(label, 0)])
        assert pairs[0].chord_line == "X" * (2 + CHORD_SLACK)

    def test_unbounded_slack(self) -> None:
        """Test that slack=None keeps the whole label."""
        label = "X" * 30
        pairs = render_chords_lyrics("Hi", [ChordPosition(label, 0)], slack=None)
        assert pairs[0].chord_line == label


class TestHelpers:
    """Test span selection and line building."""

    def test_chords_in_span_inclusive(self) -> None:
        """Test that both span ends are inclusive."""
        chords = [ChordPosition("A", 0), ChordPosition("B", 5), ChordPosition("C", 6)]
        selected = chords_in_span(chords, 0, 5)
        assert [cp.chord for cp in selected] == ["A", "B"]

    def test_build_chord_line_relative_offset(self) -> None:
        """Test that offsets are relative to the line start."""
        line = build_chord_line("world", 6, [ChordPosition("G", 8)])
        assert line == "  G  "
