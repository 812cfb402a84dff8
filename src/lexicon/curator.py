"""
Dictionary curation: turn noisy raw word lists into one trustworthy word set.

Rules, applied to every normalized candidate word:
1. Block-listed words are always rejected.
2. Allow-listed words are always accepted.
3. Abbreviations, corporate suffixes and junk letter patterns are rejected.
4. 2-letter words must be in the common digram whitelist.
5. 3-letter words must be whitelisted or come from a raw list and contain a vowel (or Y).
6. Longer words must come from a raw list.

The common digram whitelist is always part of the output.
"""

import logging
import re
from typing import Iterable, Optional, Set

from .models import CuratedDictionary
from .wordlists import (
    COMMON_ABBREVIATIONS,
    COMMON_THREE_LETTER,
    COMMON_TWO_LETTER,
    CORPORATE_SUFFIXES,
    DEFAULT_HEALTH_THRESHOLD,
    FALLBACK_SEED,
    JUNK_PATTERNS,
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
    VOWELS_OR_Y,
)

log = logging.getLogger("wordgrid")

_LETTERS_ONLY = re.compile(r"^[A-Z]+$")


def normalize_word(line: str) -> Optional[str]:
    """Trim and uppercase a raw line. Returns None unless it is a plausible word."""
    word = line.strip().upper()
    if not _LETTERS_ONLY.match(word):
        return None
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        return None
    return word


def normalize_words(lines: Iterable[str]) -> Set[str]:
    """Normalize many raw lines, dropping the ones that are not words."""
    words: Set[str] = set()
    for line in lines:
        word = normalize_word(line)
        if word:
            words.add(word)
    return words


def is_junk(word: str) -> bool:
    """True if the word looks like an abbreviation, a company name or letter noise."""
    if word in COMMON_ABBREVIATIONS:
        return True
    if any(word.endswith(suffix) for suffix in CORPORATE_SUFFIXES):
        return True
    return any(pattern.search(word) for pattern in JUNK_PATTERNS)


def _accepts(word: str, raw: Set[str], allow: Set[str], block: Set[str]) -> bool:
    # Block-list first, then allow-list; heuristics only see words on neither list
    if word in block:
        return False
    if word in allow:
        return True
    if is_junk(word):
        return False

    if len(word) == 2:
        return word in COMMON_TWO_LETTER
    if len(word) == 3:
        if word in COMMON_THREE_LETTER:
            return True
        return word in raw and any(letter in VOWELS_OR_Y for letter in word)
    return word in raw


def curate(
    raw: Iterable[str],
    allow: Optional[Iterable[str]] = None,
    block: Optional[Iterable[str]] = None,
) -> Set[str]:
    """
    Apply the curation rules to raw words.

    Args:
        raw: Words from the raw word lists (any case, untrimmed lines are fine)
        allow: Words that are always accepted unless block-listed
        block: Words that are always rejected

    Returns:
        The accepted words, uppercase
    """
    raw_words = normalize_words(raw)
    allow_words = normalize_words(allow or [])
    block_words = normalize_words(block or [])

    curated = {
        word for word in raw_words | allow_words
        if _accepts(word, raw_words, allow_words, block_words)
    }

    # Coverage guarantee for the common digrams
    curated.update(COMMON_TWO_LETTER)
    return curated


def fallback_dictionary() -> CuratedDictionary:
    """The built-in seed dictionary. Never healthy."""
    return CuratedDictionary(words=frozenset(curate(FALLBACK_SEED)), healthy=False)


def curate_dictionary(
    sources: Iterable[Iterable[str]],
    allow: Optional[Iterable[str]] = None,
    block: Optional[Iterable[str]] = None,
    health_threshold: int = DEFAULT_HEALTH_THRESHOLD,
) -> CuratedDictionary:
    """
    Build a CuratedDictionary from raw word lists.

    Falls back to the seed dictionary when neither the raw lists nor the
    allow-list contain any usable word.

    Args:
        sources: Raw word lists, each a sequence of lines
        allow: Allow-list lines
        block: Block-list lines
        health_threshold: Curated sets larger than this are healthy

    Returns:
        The curated dictionary with its health flag
    """
    raw: Set[str] = set()
    for source in sources:
        raw |= normalize_words(source)
    allow_words = normalize_words(allow or [])

    if not raw and not allow_words:
        log.warning("No usable word list sources, using the built-in seed list")
        return fallback_dictionary()

    words = curate(raw, allow_words, block)
    healthy = len(words) > health_threshold
    log.info("Curated %s words from %s raw words (healthy=%s)", f"{len(words):,}", f"{len(raw):,}", healthy)
    if not healthy:
        log.warning("Curated dictionary has only %d words, scoring will accept all words", len(words))

    return CuratedDictionary(words=frozenset(words), healthy=healthy)
