"""Grid scanning and scoring for wordgrid."""

from .models import (
    Grid,
    Cell,
    Direction,
    WordCandidate,
    ScoredWord,
    ScoringPolicy,
    ScoreResult,
    WordDelta,
)
from .parsing import parse_grid, validate_grid, format_grid
from .scanner import scan_grid, find_runs
from .engine import PRESETS, get_preset, accepts, autoguard_active, select_words, score, compare_boards
from .tracker import delta, new_word_delta, place_letter, score_placement

__all__ = [
    # Models
    "Grid",
    "Cell",
    "Direction",
    "WordCandidate",
    "ScoredWord",
    "ScoringPolicy",
    "ScoreResult",
    "WordDelta",
    # Parsing
    "parse_grid",
    "validate_grid",
    "format_grid",
    # Scanning
    "scan_grid",
    "find_runs",
    # Scoring
    "PRESETS",
    "get_preset",
    "accepts",
    "autoguard_active",
    "select_words",
    "score",
    "compare_boards",
    # Deltas
    "delta",
    "new_word_delta",
    "place_letter",
    "score_placement",
]
