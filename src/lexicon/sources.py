"""Loading raw word lists from local files and remote URLs."""

import logging
from pathlib import Path
from typing import List, Set

import requests

from .curator import curate_dictionary, normalize_words
from .models import CuratedDictionary, DictionaryConfig

log = logging.getLogger("wordgrid")

REQUEST_TIMEOUT = 30


def is_remote(source: str) -> bool:
    """True if the source should be fetched over HTTP."""
    return source.startswith(("http://", "https://"))


def _fetch_text(url: str) -> str:
    response = requests.get(url, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.text


def _read_text(path: str) -> str:
    with open(Path(path), "r", encoding="utf-8") as f:
        return f.read()


def read_word_list(source: str) -> Set[str]:
    """
    Read one newline-delimited word list.

    A source that cannot be read is treated as an empty list.

    Args:
        source: Local file path or http(s) URL

    Returns:
        Normalized uppercase words from the source
    """
    try:
        text = _fetch_text(source) if is_remote(source) else _read_text(source)
    except requests.RequestException as e:
        log.warning("Could not fetch word list %s: %s", source, e)
        return set()
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Could not read word list %s: %s", source, e)
        return set()

    words = normalize_words(text.splitlines())
    log.info("Loaded %s words from %s", f"{len(words):,}", source)
    return words


def read_word_lists(sources: List[str]) -> Set[str]:
    """Union of all readable word lists."""
    words: Set[str] = set()
    for source in sources:
        words |= read_word_list(source)
    return words


def load_curated_dictionary(config: DictionaryConfig) -> CuratedDictionary:
    """Read every configured source and curate the result. Never raises for I/O failures."""
    raw_lists = [read_word_list(source) for source in config.sources]
    allow = read_word_lists(config.allow)
    block = read_word_lists(config.block)
    return curate_dictionary(
        raw_lists,
        allow=allow,
        block=block,
        health_threshold=config.health_threshold,
    )
