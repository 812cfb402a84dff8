"""Data models for grid scanning and scoring."""

from typing import List, Literal, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


# A grid is a list of rows; each cell is None (empty) or a single uppercase letter
Grid = List[List[Optional[str]]]

Direction = Literal["right", "left", "down", "up"]
DedupeMode = Literal["occurrence", "text"]
ScoreMode = Literal["lengths", "cells"]


class Cell(NamedTuple):
    """A grid coordinate."""
    row: int
    col: int


class WordCandidate(BaseModel):
    """A contiguous run of letters read in one direction."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    path: Tuple[Cell, ...]
    direction: Direction

    @property
    def start(self) -> Cell:
        return self.path[0]

    @property
    def end(self) -> Cell:
        return self.path[-1]


class ScoredWord(WordCandidate):
    """A candidate accepted by the scoring policy."""


class ScoringPolicy(BaseModel):
    """
    Acceptance and scoring rules for one game mode.

    Attributes:
        use_dictionary: Require words to be in the curated dictionary
        min_length: Shortest accepted word
        dedupe: "occurrence" scores every position/direction, "text" scores each text once
        score_mode: "lengths" sums word lengths, "cells" counts distinct covered cells
        exclude_cooldown: Reject words containing a cooldown letter
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    use_dictionary: bool = True
    min_length: int = Field(default=2, ge=1)
    dedupe: DedupeMode = "occurrence"
    score_mode: ScoreMode = "lengths"
    exclude_cooldown: bool = False


class ScoreResult(BaseModel):
    """Result of scoring a grid."""
    total: int = 0
    words: List[ScoredWord] = Field(default_factory=list)
    scored_cells: List[Cell] = Field(default_factory=list)
    policy: ScoringPolicy = Field(default_factory=ScoringPolicy)
    autoguard: bool = False  # True when dictionary filtering was bypassed

    @property
    def texts(self) -> List[str]:
        """Scored word texts in discovery order."""
        return [word.text for word in self.words]


class WordDelta(BaseModel):
    """Points earned by words not credited before."""
    points: int = 0
    new_words: List[str] = Field(default_factory=list)
