"""Data models for dictionary curation."""

from typing import FrozenSet, List
from pydantic import BaseModel, ConfigDict, Field


class CuratedDictionary(BaseModel):
    """
    An immutable, curated set of uppercase words.

    Attributes:
        words: The accepted words (uppercase, letters only, 2-24 characters)
        healthy: Whether the set is large enough to trust for strict filtering
    """

    model_config = ConfigDict(frozen=True)

    words: FrozenSet[str] = Field(default_factory=frozenset)
    healthy: bool = False

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.upper() in self.words

    def __len__(self) -> int:
        return len(self.words)

    def sorted_words(self) -> List[str]:
        """Words in alphabetical order, for writing word-list files."""
        return sorted(self.words)


class DictionaryConfig(BaseModel):
    """Where to load raw word lists from. Entries are local paths or http(s) URLs."""
    sources: List[str] = Field(default_factory=list)
    allow: List[str] = Field(default_factory=list)
    block: List[str] = Field(default_factory=list)
    health_threshold: int = Field(default=100, ge=0)
