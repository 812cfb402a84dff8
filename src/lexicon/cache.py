"""
Load-once dictionary cache.

The cache is owned by whoever composes the application and handed to the code
that needs a dictionary. The first `get()` starts the load; concurrent callers
await the same in-flight load; later callers get the cached value.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .curator import fallback_dictionary
from .models import CuratedDictionary, DictionaryConfig
from .sources import load_curated_dictionary

log = logging.getLogger("wordgrid")

Loader = Callable[[], Awaitable[CuratedDictionary]]


class DictionaryCache:
    """
    Caches one CuratedDictionary for the lifetime of the owner.

    Attributes:
        load_count: How many times the loader has been started
    """

    def __init__(self, loader: Loader):
        self._loader = loader
        self._value: Optional[CuratedDictionary] = None
        self._task: Optional[asyncio.Task] = None
        self.load_count = 0

    @classmethod
    def from_config(cls, config: DictionaryConfig) -> "DictionaryCache":
        """Cache that curates the configured sources in a worker thread."""
        async def loader() -> CuratedDictionary:
            return await asyncio.to_thread(load_curated_dictionary, config)

        return cls(loader)

    def peek(self) -> Optional[CuratedDictionary]:
        """The cached dictionary, or None if it has not finished loading."""
        return self._value

    async def get(self) -> CuratedDictionary:
        """Return the dictionary, loading it on first use."""
        if self._value is not None:
            return self._value
        loop = asyncio.get_running_loop()
        # A load left behind by another (possibly closed) event loop is restarted here
        if self._task is None or self._task.get_loop() is not loop:
            self.load_count += 1
            self._task = loop.create_task(self._load())
            self._task.add_done_callback(self._forget_unfinished)
        return await asyncio.shield(self._task)

    def _forget_unfinished(self, task: asyncio.Task) -> None:
        # Cancelled loads must not pin later callers to a dead task
        if task.cancelled() and self._task is task:
            self._task = None

    async def _load(self) -> CuratedDictionary:
        try:
            dictionary = await self._loader()
        except Exception:
            log.exception("Dictionary load failed, using the built-in seed list")
            dictionary = fallback_dictionary()
        self._value = dictionary
        return dictionary
