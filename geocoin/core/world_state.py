"""Mutable authoritative world state: only mutated by the GameController."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geocoin.core.models import Cell, LatLng
from geocoin.core.player import PlayerState
from geocoin.core.world_memory import WorldMemory

if TYPE_CHECKING:
    from geocoin.systems.materializer import CacheView


class WorldState:
    """The single source of truth for a session."""

    __slots__ = ("player", "memory", "materialized")

    def __init__(self, player: PlayerState, memory: WorldMemory) -> None:
        self.player: PlayerState = player
        self.memory: WorldMemory = memory
        self.materialized: dict[Cell, CacheView] = {}

    @classmethod
    def fresh(cls, start: LatLng, start_cell: Cell, memory: WorldMemory) -> WorldState:
        return cls(PlayerState.starting_at(start, start_cell), memory)

    def view_for(self, cell_key: str) -> CacheView | None:
        """Return the materialized view for *cell_key*, or None if not visible."""
        try:
            cell = Cell.from_key(cell_key)
        except ValueError:
            return None
        return self.materialized.get(cell)

    def total_tokens(self) -> int:
        """Coins across every cache ever generated plus the inventory."""
        return self.memory.total_tokens() + len(self.player.inventory)
