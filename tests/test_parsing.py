"""Test grid text parsing and snapshot validation."""

import pytest

from src.scoring import format_grid, parse_grid, validate_grid


class TestParseGrid:
    """Test cases for the text grid format."""

    def test_letters_and_dots(self):
        """Dots are empty cells, letters are kept."""
        assert parse_grid("CAT\n..O") == [["C", "A", "T"], [None, None, "O"]]

    def test_other_empty_markers(self):
        """Underscores, dashes and spaces are empty too."""
        assert parse_grid("A_- ") == [["A", None, None, None]]

    def test_lowercase(self):
        """Letters are uppercased."""
        assert parse_grid("cat") == [["C", "A", "T"]]

    def test_surrounding_blank_lines(self):
        """Blank lines around the grid are ignored."""
        assert parse_grid("\n\nCAT\nDOG\n\n") == [["C", "A", "T"], ["D", "O", "G"]]

    def test_windows_line_endings(self):
        """CRLF input parses like LF input."""
        assert parse_grid("CAT\r\nDOG\r\n") == parse_grid("CAT\nDOG")

    def test_empty_text(self):
        """Empty text is an empty grid."""
        assert parse_grid("") == []

    def test_ragged_rows(self):
        """Rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="row 1 has 2 cells, expected 3"):
            parse_grid("CAT\nDO")

    def test_invalid_character(self):
        """Digits and punctuation are not cells."""
        with pytest.raises(ValueError, match="Invalid grid cell"):
            parse_grid("C4T")

    def test_format_inverse(self):
        """format_grid writes the same text format back."""
        text = "CAT\n..O\n..P"
        assert format_grid(parse_grid(text)) == text


class TestValidateGrid:
    """Test cases for in-memory grid snapshots."""

    def test_normalizes_cells(self):
        """Empty markers become None and letters are uppercased."""
        assert validate_grid([["a", "", None, " "]]) == [["A", None, None, None]]

    def test_returns_copy(self):
        """The snapshot is copied, not modified."""
        grid = [["a"]]
        validate_grid(grid)
        assert grid == [["a"]]

    def test_multi_letter_cell(self):
        """A cell holds at most one letter."""
        with pytest.raises(ValueError, match="single letter"):
            validate_grid([["AB"]])

    def test_non_string_cell(self):
        """Cells must be strings or None."""
        with pytest.raises(ValueError, match="must be a string"):
            validate_grid([[5]])

    def test_ragged(self):
        """Unequal rows are rejected."""
        with pytest.raises(ValueError, match="not rectangular"):
            validate_grid([["A"], ["B", "C"]])

    def test_letter_that_uppercases_to_two(self):
        """Characters whose uppercase form is two letters are not single letters."""
        with pytest.raises(ValueError, match="Invalid grid cell"):
            validate_grid([["ß", "A"]])
        with pytest.raises(ValueError, match="Invalid grid cell"):
            validate_grid([["ﬀ"]])

    def test_non_ascii_letter(self):
        """Only A-Z are grid letters."""
        with pytest.raises(ValueError, match="Invalid grid cell"):
            parse_grid("CAÉ")
