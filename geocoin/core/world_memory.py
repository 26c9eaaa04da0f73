"""Sparse, lazily populated registry of caches keyed by cell."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from geocoin.core.cache import Cache, CacheMemento
from geocoin.core.errors import CacheConsistencyError
from geocoin.core.models import Cell

if TYPE_CHECKING:
    from geocoin.systems.oracle import HashOracle

logger = logging.getLogger(__name__)


class WorldMemory:
    """The single long-lived owner of cache state for a session.

    Entries are created on first generation of a cell and never evicted.
    """

    __slots__ = ("_oracle", "_max_tokens", "_caches")

    def __init__(self, oracle: HashOracle, max_initial_tokens: int = 5) -> None:
        self._oracle = oracle
        self._max_tokens = max_initial_tokens
        self._caches: dict[Cell, Cache] = {}

    def __len__(self) -> int:
        return len(self._caches)

    def __contains__(self, cell: object) -> bool:
        return cell in self._caches

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._caches)

    def get(self, cell: Cell) -> Cache | None:
        return self._caches.get(cell)

    def get_or_create(self, cell: Cell) -> Cache:
        """Return the cache at *cell*, generating it from the oracle on first visit.

        Existing caches go through a capture/restore round trip before being
        returned; a divergence means the memento codec is broken.
        """
        cache = self._caches.get(cell)
        if cache is None:
            count = self._oracle.initial_token_count(cell, self._max_tokens)
            cache = Cache.create(cell, count)
            self._caches[cell] = cache
            logger.debug("Generated cache at %s with %d coins", cell.key, count)
            return cache

        before = list(cache.tokens)
        cache.restore(cache.capture())
        if cache.tokens != before:
            raise CacheConsistencyError(f"cache at {cell.key} changed across capture/restore")
        return cache

    def restore_cache(self, cell: Cell, memento: CacheMemento) -> Cache:
        """Rehydrate a persisted cache onto a fresh empty cache bound to *cell*."""
        cache = Cache(cell=cell)
        cache.restore(memento)
        self._caches[cell] = cache
        return cache

    def mementos(self) -> dict[Cell, CacheMemento]:
        return {cell: cache.capture() for cell, cache in self._caches.items()}

    def total_tokens(self) -> int:
        return sum(len(c) for c in self._caches.values())
