"""
Turn-scoped score deltas.

Two ways to credit a move, one per game mode:
- Total delta: rescore the whole board and credit max(0, new - previous)
- New words: credit only words whose text the player has not been credited with
  this round

Bookkeeping of credited words stays with the caller; nothing here holds state.
"""

from typing import AbstractSet, Iterable, List, Optional, Set

from ..lexicon.models import CuratedDictionary
from .engine import score
from .models import Cell, Grid, ScoredWord, ScoringPolicy, WordDelta
from .parsing import validate_grid


def delta(previous_total: int, new_total: int) -> int:
    """Non-negative score change between two whole-board totals."""
    return max(0, new_total - previous_total)


def new_word_delta(words: Iterable[ScoredWord], credited: AbstractSet[str]) -> WordDelta:
    """
    Credit words whose text has not been credited before.

    Each new text is credited once, even if it occurs several times.

    Args:
        words: Scored words formed by the move
        credited: Uppercase texts already credited to this player this round

    Returns:
        WordDelta with the points and the newly credited texts, in order
    """
    new_words: List[str] = []
    seen: Set[str] = set()
    points = 0

    for word in words:
        if word.text in credited or word.text in seen:
            continue
        seen.add(word.text)
        new_words.append(word.text)
        points += len(word.text)

    return WordDelta(points=points, new_words=new_words)


def place_letter(grid: Grid, row: int, col: int, letter: str) -> Grid:
    """
    Return a copy of the grid with one letter placed.

    Raises:
        ValueError: If the cell is out of bounds, occupied, or the letter is invalid
    """
    board = validate_grid(grid)
    if not (0 <= row < len(board) and 0 <= col < len(board[0])):
        raise ValueError(f"Cell ({row}, {col}) is outside the grid")
    if board[row][col] is not None:
        raise ValueError(f"Cell ({row}, {col}) is already occupied")

    placed = letter.strip().upper()
    if len(placed) != 1 or not ('A' <= placed <= 'Z'):
        raise ValueError(f"Invalid letter {letter!r}: expected a single letter A-Z")

    board[row][col] = placed
    return board


def score_placement(
    grid: Grid,
    row: int,
    col: int,
    letter: str,
    dictionary: Optional[CuratedDictionary] = None,
    policy: Optional[ScoringPolicy] = None,
    credited: AbstractSet[str] = frozenset(),
    cooldown_letters: Optional[Iterable[str]] = None,
) -> WordDelta:
    """
    Score a single letter placement by the new words it forms.

    Only scored words that pass through the placed cell count, and only if their
    text is not in `credited`. The caller adds `new_words` to its credited set.
    """
    board = place_letter(grid, row, col, letter)
    result = score(board, dictionary, policy, cooldown_letters)
    placed = Cell(row, col)
    crossing = [word for word in result.words if placed in word.path]
    return new_word_delta(crossing, credited)
