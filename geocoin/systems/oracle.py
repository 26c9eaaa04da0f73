"""Deterministic hash oracle using xxhash.

The world is never stored exhaustively: whether a cell holds a cache, and
how many coins it starts with, is a pure function of the cell coordinates.

Formula: value = xxh64(seed, "i,j[,stream]") / 2**64
"""

from __future__ import annotations

import math

import xxhash

from geocoin.core.models import Cell

INITIAL_TOKENS_STREAM = "initialCoins"


class HashOracle:
    """Stateless string-keyed pseudo-random oracle.

    Each call is a pure function of (seed, key); no internal mutable state,
    therefore fully thread-safe and stable across process runs.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @staticmethod
    def key_for(*parts: object) -> str:
        """Comma-join key parts, e.g. ``key_for(3, -4, "initialCoins") == "3,-4,initialCoins"``."""
        return ",".join(str(p) for p in parts)

    def value(self, key: str) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return xxhash.xxh64_intdigest(key.encode("utf-8"), seed=self._seed) / (self._MAX_UINT64 + 1)

    def spawn_roll(self, cell: Cell) -> float:
        return self.value(self.key_for(cell.i, cell.j))

    def has_cache(self, cell: Cell, probability: float) -> bool:
        return self.spawn_roll(cell) < probability

    def initial_token_count(self, cell: Cell, max_tokens: int) -> int:
        """Number of coins a freshly generated cache starts with, in [1, max_tokens]."""
        roll = self.value(self.key_for(cell.i, cell.j, INITIAL_TOKENS_STREAM))
        return math.floor(roll * max_tokens + 1)
