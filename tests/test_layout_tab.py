"""Tests for the tablature layout engine."""

import pytest

from tabnotes.layout.tab import (
    STRING_NAMES,
    column_width,
    is_tab_group,
    read_tab,
    render_tab,
)
from tabnotes.models import Note


class TestColumnWidth:
    """Test note column widths."""

    def test_single_digit(self) -> None:
        """Test that single-digit frets use width 1."""
        assert column_width(Note({1: "3", 4: "5"})) == 1

    def test_two_digit(self) -> None:
        """Test that a two-digit fret widens the column."""
        assert column_width(Note({1: "3", 2: "12"})) == 2

    def test_empty_note(self) -> None:
        """Test that a note with no frets still has width 1."""
        assert column_width(Note()) == 1


class TestRenderTabEmpty:
    """Test the empty tab."""

    def test_empty_border(self) -> None:
        """Test that no notes gives six empty tab borders."""
        assert render_tab([]) == [
            "e|---|",
            "B|---|",
            "G|---|",
            "D|---|",
            "A|---|",
            "E|---|",
        ]


class TestRenderTabNotes:
    """Test tab layout with notes."""

    def test_string_order(self) -> None:
        """Test that lines follow the high-to-low string order."""
        lines = render_tab([Note({1: "0"})])
        assert [line[0] for line in lines] == list(STRING_NAMES)

    def test_single_note(self) -> None:
        """Test a single single-digit note on the high e string."""
        lines = render_tab([Note({1: "3"})])
        assert lines[0] == "e|--3---|"
        for line in lines[1:]:
            assert line[1:] == "|------|"

    def test_low_string(self) -> None:
        """Test that string 6 maps to the low E line."""
        lines = render_tab([Note({6: "5"})])
        assert lines[5] == "E|--5---|"
        assert lines[0] == "e|------|"

    def test_width_forcing_note(self) -> None:
        """Test that a two-digit fret widens the column on every string."""
        lines = render_tab([Note({1: "3", 2: "12"})])
        assert lines[0] == "e|---3---|"
        assert lines[1] == "B|--12---|"
        assert lines[2] == "G|-------|"
        for line in lines:
            # Lead-in is "x|--", then a 3-wide cell, then "--|"
            assert len(line) == 4 + 3 + 3

    def test_separator_between_notes(self) -> None:
        """Test one dash between notes and none after the last."""
        lines = render_tab([Note({1: "0"}), Note({1: "2"})])
        assert lines[0] == "e|--0--2---|"
        assert lines[1] == "B|---------|"

    def test_mixed_widths(self) -> None:
        """Test columns of different widths in sequence."""
        lines = render_tab([Note({1: "3"}), Note({2: "12"})])
        assert lines[0] == "e|--3-------|"
        assert lines[1] == "B|-----12---|"

    def test_lines_have_equal_length(self) -> None:
        """Test that all string lines stay aligned."""
        notes = [Note({1: "3", 6: "10"}), Note({3: "7"}), Note({2: "24", 5: "0"})]
        lengths = {len(line) for line in render_tab(notes)}
        assert len(lengths) == 1

    def test_labels_not_validated(self) -> None:
        """Test that fret labels are laid out verbatim."""
        lines = render_tab([Note({1: "07"})])
        assert lines[0] == "e|--07---|"

    def test_idempotent(self) -> None:
        """Test that rendering twice gives identical output."""
        notes = [Note({1: "3", 2: "12"}), Note({4: "5"})]
        assert render_tab(notes) == render_tab(notes)


class TestReadTab:
    """Reading notes back from rendered tablature."""

    def test_reads_rendered_notes(self) -> None:
        """Test that rendered notes, wide frets included, read back unchanged."""
        notes = [Note({1: "3", 2: "0"}), Note({2: "12", 3: "7"}), Note({6: "0"})]
        assert read_tab(render_tab(notes)) == notes

    def test_mixed_widths_in_one_column(self) -> None:
        """Test that a short label centered under a wide one stays in its note."""
        notes = [Note({1: "1", 2: "123"}), Note({1: "5"})]
        assert read_tab(render_tab(notes)) == notes

    def test_empty(self) -> None:
        """Test that an empty tab has no notes."""
        assert read_tab(render_tab([])) == []

    def test_not_a_tab(self) -> None:
        """Test that other text is rejected."""
        lines = ["e|--3--|", "B|-----|", "Hello"]
        assert not is_tab_group(lines)
        with pytest.raises(ValueError, match="six tablature lines"):
            read_tab(lines)

    def test_uneven_lines_are_not_a_tab(self) -> None:
        """Test that lines of different widths are not a group."""
        lines = render_tab([Note({1: "3"})])
        lines[3] += "-"
        assert not is_tab_group(lines)
