"""Test turn-scoped score deltas and placement scoring."""

import pytest

from src.lexicon import CuratedDictionary
from src.scoring import (
    ScoringPolicy,
    WordDelta,
    delta,
    new_word_delta,
    parse_grid,
    place_letter,
    score,
    score_placement,
)


DICTIONARY = CuratedDictionary(words=frozenset({"CAT", "AT", "CA", "TOP"}), healthy=True)


class TestDelta:
    """Test cases for whole-board total deltas."""

    def test_increase(self):
        """A higher total credits the difference."""
        assert delta(5, 8) == 3

    def test_no_change(self):
        """An unchanged total credits nothing."""
        for total in (0, 1, 7, 100):
            assert delta(total, total) == 0

    def test_decrease_clamped(self):
        """A lower total never produces a negative delta."""
        assert delta(8, 5) == 0

    def test_never_negative(self):
        """Delta is non-negative across a range of totals."""
        for previous in range(0, 20, 3):
            for new in range(0, 20, 4):
                assert delta(previous, new) >= 0

    def test_board_rescore(self):
        """Rescoring after a placement credits only the growth."""
        policy = ScoringPolicy(min_length=2)
        before = score(parse_grid("CA."), DICTIONARY, policy).total
        after = score(parse_grid("CAT"), DICTIONARY, policy).total
        assert (before, after) == (2, 7)
        assert delta(before, after) == 5


class TestNewWordDelta:
    """Test cases for word-identity deltas."""

    def test_uncredited_words_score(self):
        """Words not yet credited add their lengths."""
        words = score(parse_grid("CAT\n..O\n..P"), DICTIONARY, ScoringPolicy(min_length=3)).words

        result = new_word_delta(words, set())

        assert result == WordDelta(points=6, new_words=["CAT", "TOP"])

    def test_credited_words_skipped(self):
        """Words credited earlier in the round score nothing."""
        words = score(parse_grid("CAT\n..O\n..P"), DICTIONARY, ScoringPolicy(min_length=3)).words

        result = new_word_delta(words, {"CAT"})

        assert result.new_words == ["TOP"]
        assert result.points == 3

    def test_repeated_text_credited_once(self):
        """Two occurrences of a new text are credited once."""
        words = score(parse_grid("CAT\n...\nCAT"), DICTIONARY, ScoringPolicy(min_length=3)).words
        assert len(words) == 2

        result = new_word_delta(words, frozenset())

        assert result.new_words == ["CAT"]
        assert result.points == 3

    def test_nothing_new(self):
        """No words means no points."""
        assert new_word_delta([], set()) == WordDelta()


class TestPlaceLetter:
    """Test cases for placing a letter on a copy of the grid."""

    def test_places_uppercase(self):
        """The letter is uppercased on the copy."""
        grid = parse_grid("CA.")
        board = place_letter(grid, 0, 2, "t")
        assert board == [["C", "A", "T"]]

    def test_original_untouched(self):
        """The caller's grid is not modified."""
        grid = parse_grid("CA.")
        place_letter(grid, 0, 2, "T")
        assert grid == [["C", "A", None]]

    def test_occupied_cell(self):
        """Placing on a letter is a caller error."""
        with pytest.raises(ValueError, match="already occupied"):
            place_letter(parse_grid("CAT"), 0, 1, "X")

    def test_out_of_bounds(self):
        """Placing outside the grid is a caller error."""
        with pytest.raises(ValueError, match="outside the grid"):
            place_letter(parse_grid("CA."), 1, 0, "T")

    def test_invalid_letter(self):
        """Only single letters can be placed."""
        with pytest.raises(ValueError, match="Invalid letter"):
            place_letter(parse_grid("CA."), 0, 2, "7")


class TestScorePlacement:
    """Test cases for scoring a single placement by new words."""

    def test_new_words_through_placed_cell(self):
        """Only words crossing the placed cell count."""
        result = score_placement(parse_grid("CA."), 0, 2, "T", DICTIONARY, ScoringPolicy(min_length=2))

        assert result.new_words == ["CAT", "AT"]
        assert result.points == 5

    def test_credited_words_excluded(self):
        """Words already credited this round are skipped."""
        result = score_placement(
            parse_grid("CA."), 0, 2, "T", DICTIONARY, ScoringPolicy(min_length=2), credited={"CAT"}
        )

        assert result.new_words == ["AT"]
        assert result.points == 2

    def test_vertical_word(self):
        """Placements complete column words too."""
        grid = parse_grid("CAT\n..O\n...")
        result = score_placement(grid, 2, 2, "P", DICTIONARY, ScoringPolicy(min_length=3))
        assert result.new_words == ["TOP"]

    def test_no_words_formed(self):
        """An isolated letter earns nothing."""
        grid = parse_grid("CAT\n...\n...")
        result = score_placement(grid, 2, 0, "Z", DICTIONARY, ScoringPolicy(min_length=2))
        assert result == WordDelta()
