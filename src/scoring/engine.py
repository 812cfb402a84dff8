"""
Scoring policy engine.

Filters scanned candidates into scored words and totals them:
1. Length: candidates shorter than the policy minimum are rejected
2. Dictionary: when enabled, the text must be in the curated dictionary,
   unless the dictionary is missing or unhealthy (autoguard: accept all)
3. Cooldown: when enabled, texts containing a cooldown letter are rejected
4. Dedupe: per occurrence, or only the first occurrence of each text
"""

import logging
from typing import AbstractSet, Dict, Iterable, List, Literal, Optional, Set

from ..lexicon.models import CuratedDictionary
from .models import Cell, Grid, ScoredWord, ScoreResult, ScoringPolicy, WordCandidate
from .scanner import scan_grid

log = logging.getLogger("wordgrid")


PRESETS: Dict[str, ScoringPolicy] = {
    "free_play": ScoringPolicy(use_dictionary=True, min_length=2),
    "classic": ScoringPolicy(use_dictionary=True, min_length=3),
    "board_total": ScoringPolicy(use_dictionary=False, min_length=3),
    "coverage": ScoringPolicy(use_dictionary=True, min_length=3, dedupe="text", score_mode="cells"),
    "cooldown": ScoringPolicy(use_dictionary=True, min_length=3, exclude_cooldown=True),
}


def get_preset(name: str) -> ScoringPolicy:
    """Look up a named policy preset."""
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scoring preset '{name}'. Available: {', '.join(sorted(PRESETS))}"
        ) from None


def autoguard_active(dictionary: Optional[CuratedDictionary], policy: ScoringPolicy) -> bool:
    """True when dictionary filtering is requested but the dictionary cannot be trusted."""
    return policy.use_dictionary and (dictionary is None or not dictionary.healthy)


def _normalize_letters(letters: Optional[Iterable[str]]) -> Set[str]:
    return {letter.strip().upper() for letter in letters or [] if letter.strip()}


def accepts(
    text: str,
    dictionary: Optional[CuratedDictionary],
    policy: ScoringPolicy,
    cooldown_letters: AbstractSet[str] = frozenset(),
) -> bool:
    """
    Acceptance test for a single candidate text.

    Args:
        text: Candidate letters in reading order
        dictionary: Curated dictionary, or None if not loaded
        policy: Scoring policy
        cooldown_letters: Uppercase letters currently on cooldown

    Returns:
        True if the text would be scored
    """
    word = text.upper()
    if len(word) < policy.min_length:
        return False
    if policy.exclude_cooldown and any(letter in cooldown_letters for letter in word):
        return False
    if policy.use_dictionary and not autoguard_active(dictionary, policy):
        return word in dictionary
    return True


def select_words(
    candidates: Iterable[WordCandidate],
    dictionary: Optional[CuratedDictionary],
    policy: ScoringPolicy,
    cooldown_letters: Optional[Iterable[str]] = None,
) -> List[ScoredWord]:
    """Apply acceptance and dedupe to candidates, preserving their order."""
    cooldown = _normalize_letters(cooldown_letters)
    seen: Set[str] = set()
    words: List[ScoredWord] = []

    for candidate in candidates:
        if not accepts(candidate.text, dictionary, policy, cooldown):
            continue
        if policy.dedupe == "text":
            if candidate.text in seen:
                continue
            seen.add(candidate.text)
        words.append(ScoredWord(
            text=candidate.text,
            path=candidate.path,
            direction=candidate.direction,
        ))

    return words


def covered_cells(words: Iterable[WordCandidate]) -> List[Cell]:
    """Distinct cells covered by the words, in row-major order."""
    return sorted({cell for word in words for cell in word.path})


def total_for(words: List[ScoredWord], policy: ScoringPolicy) -> int:
    """Total score of already-selected words under the policy's score mode."""
    if policy.score_mode == "cells":
        return len(covered_cells(words))
    return sum(len(word.text) for word in words)


def score(
    grid: Grid,
    dictionary: Optional[CuratedDictionary] = None,
    policy: Optional[ScoringPolicy] = None,
    cooldown_letters: Optional[Iterable[str]] = None,
) -> ScoreResult:
    """
    Score a grid snapshot.

    Args:
        grid: Rectangular grid of letters and empty cells
        dictionary: Curated dictionary; None behaves like an unhealthy dictionary
        policy: Scoring policy (defaults to ScoringPolicy())
        cooldown_letters: Letters on cooldown, used when the policy excludes them

    Returns:
        ScoreResult with the scored words, covered cells and total

    Raises:
        ValueError: If the grid is malformed
    """
    policy = policy or ScoringPolicy()
    guarded = autoguard_active(dictionary, policy)
    if guarded:
        log.debug("Dictionary missing or unhealthy, accepting all words of length >= %d", policy.min_length)

    candidates = scan_grid(grid, policy.min_length)
    words = select_words(candidates, dictionary, policy, cooldown_letters)

    return ScoreResult(
        total=total_for(words, policy),
        words=words,
        scored_cells=covered_cells(words),
        policy=policy,
        autoguard=guarded,
    )


Winner = Literal["first", "second", "tie"]


def compare_boards(
    first: Grid,
    second: Grid,
    dictionary: Optional[CuratedDictionary] = None,
    policy: Optional[ScoringPolicy] = None,
) -> Winner:
    """Score two boards under the same policy and report which one is ahead."""
    first_total = score(first, dictionary, policy).total
    second_total = score(second, dictionary, policy).total
    if first_total > second_total:
        return "first"
    if first_total < second_total:
        return "second"
    return "tie"
