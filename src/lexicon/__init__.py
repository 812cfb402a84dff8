"""Dictionary curation for wordgrid."""

from .models import CuratedDictionary, DictionaryConfig
from .curator import curate, curate_dictionary, fallback_dictionary, is_junk, normalize_word, normalize_words
from .sources import read_word_list, read_word_lists, load_curated_dictionary
from .cache import DictionaryCache

__all__ = [
    # Models
    "CuratedDictionary",
    "DictionaryConfig",
    # Curation
    "curate",
    "curate_dictionary",
    "fallback_dictionary",
    "is_junk",
    "normalize_word",
    "normalize_words",
    # Sources
    "read_word_list",
    "read_word_lists",
    "load_curated_dictionary",
    # Cache
    "DictionaryCache",
]
