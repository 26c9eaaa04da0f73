"""Persistence gateway: whole-snapshot save/load/reset over a key-value store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from geocoin.core.errors import MalformedSnapshot
from geocoin.core.inventory import Inventory
from geocoin.core.player import PlayerState
from geocoin.core.snapshot import PersistedSnapshot
from geocoin.core.world_state import WorldState

if TYPE_CHECKING:
    from geocoin.core.world_memory import WorldMemory
    from geocoin.systems.grid_mapper import GridMapper
    from geocoin.systems.storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "geocoinState"


class PersistenceGateway:
    """Serializes the full world into one storage slot; last writer wins."""

    __slots__ = ("_store", "_key", "_mapper", "_memory_factory")

    def __init__(
        self,
        store: KeyValueStore,
        mapper: GridMapper,
        memory_factory: Callable[[], WorldMemory],
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._store = store
        self._key = key
        self._mapper = mapper
        self._memory_factory = memory_factory

    @property
    def key(self) -> str:
        return self._key

    def save(self, world: WorldState) -> bool:
        """Overwrite the stored snapshot. Returns False (and logs) on I/O failure."""
        snapshot = PersistedSnapshot.from_world(world)
        try:
            self._store.set_item(self._key, snapshot.to_json())
        except OSError:
            logger.exception("Failed to save world state under %r", self._key)
            return False
        logger.info(
            "Saved world state: player at %s, %d coins held, %d caches",
            snapshot.player_cell.key, len(snapshot.inventory), len(snapshot.caches),
        )
        return True

    def load(self) -> WorldState | None:
        """Rebuild a WorldState from storage, or None when absent or unreadable."""
        try:
            raw = self._store.get_item(self._key)
        except OSError:
            logger.exception("Failed to read world state under %r", self._key)
            return None
        if raw is None:
            logger.info("No saved world state under %r; starting clean", self._key)
            return None
        try:
            snapshot = PersistedSnapshot.from_json(raw)
        except MalformedSnapshot as exc:
            logger.warning("Ignoring malformed saved state: %s", exc)
            return None
        world = self.rebuild(snapshot)
        logger.info(
            "Loaded world state: player at %s, %d coins held, %d caches",
            snapshot.player_cell.key, len(snapshot.inventory), len(snapshot.caches),
        )
        return world

    def rebuild(self, snapshot: PersistedSnapshot) -> WorldState:
        memory = self._memory_factory()
        for cell, memento in snapshot.caches.items():
            memory.restore_cache(cell, memento)

        trail = list(snapshot.trail)
        if trail and self._mapper.to_cell(trail[-1].lat, trail[-1].lng) == snapshot.player_cell:
            position = trail[-1]
        else:
            position = self._mapper.to_position(snapshot.player_cell)
            trail.append(position)

        player = PlayerState(
            position=position,
            cell=snapshot.player_cell,
            inventory=Inventory(tokens=list(snapshot.inventory)),
            trail=trail,
        )
        return WorldState(player, memory)

    def reset(self) -> None:
        """Destroy the durable copy."""
        try:
            self._store.clear()
        except OSError:
            logger.exception("Failed to clear saved world state")
            return
        logger.info("Cleared saved world state")
