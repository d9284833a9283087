"""Tests for the shared padding helpers."""

from tabnotes.layout.padding import center_pad, dashes


class TestDashes:
    """Test dash runs."""

    def test_zero(self) -> None:
        """Test that zero dashes is an empty string."""
        assert dashes(0) == ""

    def test_count(self) -> None:
        """Test a run of dashes."""
        assert dashes(3) == "---"


class TestCenterPad:
    """Test label centering."""

    def test_even_padding(self) -> None:
        """Test a label with the same padding on both sides."""
        assert center_pad("3", 3) == "-3-"

    def test_odd_padding_extra_goes_right(self) -> None:
        """Test that an odd leftover puts the extra dash on the right."""
        assert center_pad("3", 2) == "3-"
        assert center_pad("12", 3) == "12-"
        assert center_pad("7", 4) == "-7--"

    def test_exact_width(self) -> None:
        """Test a label that fills the whole cell."""
        assert center_pad("12", 2) == "12"

    def test_empty_label(self) -> None:
        """Test centering nothing."""
        assert center_pad("", 3) == "---"

    def test_custom_fill(self) -> None:
        """Test padding with another character."""
        assert center_pad("x", 3, fill=" ") == " x "

    def test_result_width(self) -> None:
        """Test that the result always has the requested width."""
        for width in range(2, 8):
            assert len(center_pad("12", width)) == width
