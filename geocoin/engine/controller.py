"""GameController: the single writer of WorldState.

Every mutation (movement, location fixes, collect/deposit, save/load/reset)
arrives as a command and runs to completion under one lock, so handlers
never interleave even when commands come from the API thread pool, the
autosave timer and a geolocation callback at the same time.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from geocoin.core.enums import EventCategory
from geocoin.core.errors import GeolocationUnavailable
from geocoin.core.models import DIRECTION_OFFSETS, LatLng
from geocoin.core.player import PlayerState
from geocoin.core.world_memory import WorldMemory
from geocoin.core.world_state import WorldState
from geocoin.engine.commands import (
    Collect,
    Command,
    CommandResult,
    Deposit,
    EnableGeolocation,
    Load,
    Move,
    Reset,
    Save,
    UpdateLocation,
)
from geocoin.engine.persistence import PersistenceGateway
from geocoin.systems.grid_mapper import GridMapper
from geocoin.systems.materializer import CacheView, ViewportMaterializer
from geocoin.systems.oracle import HashOracle
from geocoin.systems.storage import MemoryStore
from geocoin.utils.event_log import EventLog

if TYPE_CHECKING:
    from geocoin.config import WorldConfig
    from geocoin.core.enums import Direction
    from geocoin.engine.interfaces import GeolocationSource, RenderSurface
    from geocoin.systems.storage import KeyValueStore

logger = logging.getLogger(__name__)


class GameController:
    """Owns the WorldState and applies commands to it one at a time."""

    def __init__(
        self,
        config: WorldConfig,
        store: KeyValueStore | None = None,
        surface: RenderSurface | None = None,
        geolocation: GeolocationSource | None = None,
    ) -> None:
        self._config = config
        self._oracle = HashOracle(config.oracle_seed)
        self._mapper = GridMapper.from_config(config)
        self._materializer = ViewportMaterializer(config, self._oracle, self._mapper)
        self._gateway = PersistenceGateway(
            store if store is not None else MemoryStore(),
            self._mapper,
            self._new_memory,
            key=config.storage_key,
        )
        self._surface = surface
        self._geolocation = geolocation
        self._geolocation_enabled = False
        self._lock = threading.RLock()
        self._event_log = EventLog()

        self._world = WorldState(self._starting_player(), self._new_memory())
        self._refresh()

    # -- public properties --

    @property
    def config(self) -> WorldConfig:
        return self._config

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def oracle(self) -> HashOracle:
        return self._oracle

    @property
    def mapper(self) -> GridMapper:
        return self._mapper

    @property
    def materializer(self) -> ViewportMaterializer:
        return self._materializer

    @property
    def gateway(self) -> PersistenceGateway:
        return self._gateway

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def geolocation_enabled(self) -> bool:
        return self._geolocation_enabled

    @property
    def lock(self) -> threading.RLock:
        """Held by readers that need a consistent view across several fields."""
        return self._lock

    # -- lifecycle --

    def start_session(self) -> bool:
        """Restore the persisted world if there is one. Returns True when loaded."""
        return self.dispatch(Load()).ok

    # -- commands --

    def dispatch(self, command: Command) -> CommandResult:
        with self._lock:
            match command:
                case Move(direction=direction):
                    return self._move(direction)
                case UpdateLocation(lat=lat, lng=lng):
                    return self._relocate(LatLng(lat, lng), EventCategory.GEOLOCATION)
                case Collect(cell_key=key):
                    return self._collect(key)
                case Deposit(cell_key=key):
                    return self._deposit(key)
                case Save():
                    return self._save()
                case Load():
                    return self._load()
                case Reset():
                    return self._reset()
                case EnableGeolocation():
                    return self._enable_geolocation()
            raise TypeError(f"unknown command: {command!r}")

    def visible_caches(self) -> list[CacheView]:
        with self._lock:
            return list(self._world.materialized.values())

    # -- handlers --

    def _move(self, direction: Direction) -> CommandResult:
        di, dj = DIRECTION_OFFSETS[direction]
        tile = self._mapper.tile_degrees
        target = self._world.player.position.shifted(di * tile, dj * tile)
        return self._relocate(target, EventCategory.MOVE)

    def _relocate(self, position: LatLng, category: EventCategory) -> CommandResult:
        player = self._world.player
        cell = self._mapper.to_cell(position.lat, position.lng)
        player.move_to(position, cell)
        self._refresh()
        message = f"Player at {cell.key} ({len(self._world.materialized)} caches nearby)."
        self._event_log.record(category.value, message)
        return CommandResult(True, message)

    def _collect(self, cell_key: str) -> CommandResult:
        view = self._world.view_for(cell_key)
        if view is None:
            return CommandResult(False, f"No cache at {cell_key} in view.")
        inventory = self._world.player.inventory
        if not view.collect(inventory):
            return CommandResult(False, f"Cache at {cell_key} is empty.")
        message = f"Collected {inventory.peek().label} from {cell_key}. {inventory.summary()}"
        self._event_log.record(EventCategory.COLLECT.value, message)
        return CommandResult(True, message)

    def _deposit(self, cell_key: str) -> CommandResult:
        view = self._world.view_for(cell_key)
        if view is None:
            return CommandResult(False, f"No cache at {cell_key} in view.")
        inventory = self._world.player.inventory
        if not view.deposit(inventory):
            return CommandResult(False, "No coins to deposit.")
        message = f"Deposited {view.cache.tokens[-1].label} into {cell_key}. {inventory.summary()}"
        self._event_log.record(EventCategory.DEPOSIT.value, message)
        return CommandResult(True, message)

    def _save(self) -> CommandResult:
        if not self._gateway.save(self._world):
            return CommandResult(False, "Save failed.")
        message = f"Saved {len(self._world.memory)} caches."
        self._event_log.record(EventCategory.SAVE.value, message)
        return CommandResult(True, message)

    def _load(self) -> CommandResult:
        world = self._gateway.load()
        if world is None:
            return CommandResult(False, "No saved state.")
        self._world = world
        self._refresh()
        message = f"Loaded state: player at {world.player.cell.key}, {len(world.memory)} caches."
        self._event_log.record(EventCategory.LOAD.value, message)
        return CommandResult(True, message)

    def _reset(self) -> CommandResult:
        # Caches already in memory survive; only the durable copy and player fields reset
        self._gateway.reset()
        self._world.player = self._starting_player()
        self._refresh()
        message = f"Reset player to {self._world.player.cell.key}."
        self._event_log.record(EventCategory.RESET.value, message)
        logger.info("Game reset (world memory keeps %d caches)", len(self._world.memory))
        return CommandResult(True, message)

    def _enable_geolocation(self) -> CommandResult:
        if self._geolocation_enabled:
            return CommandResult(True, "Geolocation already enabled.")
        source = self._geolocation
        if source is None or not source.available:
            logger.warning("Geolocation is not available on this host")
            return CommandResult(False, "Geolocation unavailable.")
        try:
            source.watch(self._on_location)
        except GeolocationUnavailable as exc:
            logger.warning("Geolocation unavailable: %s", exc)
            return CommandResult(False, "Geolocation unavailable.")
        self._geolocation_enabled = True
        self._event_log.record(EventCategory.GEOLOCATION.value, "Geolocation enabled.")
        logger.info("Geolocation enabled")
        return CommandResult(True, "Geolocation enabled.")

    def _on_location(self, lat: float, lng: float) -> None:
        self.dispatch(UpdateLocation(lat, lng))

    # -- internals --

    def _new_memory(self) -> WorldMemory:
        return WorldMemory(self._oracle, self._config.max_initial_tokens)

    def _starting_player(self) -> PlayerState:
        start = LatLng(self._config.start_lat, self._config.start_lng)
        return PlayerState.starting_at(start, self._mapper.to_cell(start.lat, start.lng))

    def _refresh(self) -> None:
        """Materializer pass plus player/trail updates on the attached surface."""
        self._materializer.regenerate(self._world, self._surface)
        if self._surface is not None:
            player = self._world.player
            self._surface.set_player_marker(player.position)
            self._surface.set_trail(list(player.trail))
            self._surface.center_on(player.position)
