"""Viewport materializer: reconciles visible caches with the player's neighborhood."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geocoin.core.models import Cell, LatLng

if TYPE_CHECKING:
    from geocoin.config import WorldConfig
    from geocoin.core.cache import Cache
    from geocoin.core.inventory import Inventory
    from geocoin.core.world_state import WorldState
    from geocoin.engine.interfaces import RenderSurface
    from geocoin.systems.grid_mapper import GridMapper
    from geocoin.systems.oracle import HashOracle

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CacheView:
    """A materialized cache region bound to the live Cache (never a copy)."""

    cache: Cache
    south_west: LatLng
    north_east: LatLng

    @property
    def cell(self) -> Cell:
        return self.cache.cell

    @property
    def key(self) -> str:
        return self.cache.cell.key

    def labels(self) -> list[str]:
        return self.cache.labels()

    def describe(self) -> str:
        return self.cache.describe()

    def collect(self, inventory: Inventory) -> bool:
        return self.cache.collect(inventory)

    def deposit(self, inventory: Inventory) -> bool:
        return self.cache.deposit(inventory)


class ViewportMaterializer:
    """Decides which cells in the window hold caches and materializes them.

    The window is the half-open square ``[ci-R, ci+R) x [cj-R, cj+R)`` around
    the player's cell, so it extends one cell further south/west than
    north/east.
    """

    __slots__ = ("_oracle", "_mapper", "_radius", "_probability")

    def __init__(self, config: WorldConfig, oracle: HashOracle, mapper: GridMapper) -> None:
        self._oracle = oracle
        self._mapper = mapper
        self._radius = config.neighborhood_size
        self._probability = config.cache_spawn_probability

    @property
    def radius(self) -> int:
        return self._radius

    def neighborhood(self, center: Cell) -> list[Cell]:
        r = self._radius
        return [
            Cell(i, j)
            for i in range(center.i - r, center.i + r)
            for j in range(center.j - r, center.j + r)
        ]

    def spawned_cells(self, center: Cell) -> list[Cell]:
        return [c for c in self.neighborhood(center) if self._oracle.has_cache(c, self._probability)]

    def regenerate(self, world: WorldState, surface: RenderSurface | None = None) -> list[CacheView]:
        """Tear down every materialized cache and rebuild the window around the player."""
        self.teardown(world, surface)
        views: list[CacheView] = []
        for cell in self.spawned_cells(world.player.cell):
            cache = world.memory.get_or_create(cell)
            sw, ne = self._mapper.bounds(cell)
            view = CacheView(cache=cache, south_west=sw, north_east=ne)
            world.materialized[cell] = view
            views.append(view)
            if surface is not None:
                surface.add_cache_region(view)
        logger.debug(
            "Materialized %d caches around %s (memory holds %d)",
            len(views), world.player.cell.key, len(world.memory),
        )
        return views

    @staticmethod
    def teardown(world: WorldState, surface: RenderSurface | None = None) -> None:
        world.materialized.clear()
        if surface is not None:
            surface.clear_cache_regions()
