"""Core data models and world representation."""

from geocoin.core.cache import Cache, CacheMemento
from geocoin.core.enums import Direction, EventCategory
from geocoin.core.errors import CacheConsistencyError, GeocoinError, GeolocationUnavailable, MalformedSnapshot
from geocoin.core.inventory import Inventory
from geocoin.core.models import Cell, LatLng, Token
from geocoin.core.player import PlayerState
from geocoin.core.snapshot import PersistedSnapshot
from geocoin.core.world_memory import WorldMemory
from geocoin.core.world_state import WorldState

__all__ = [
    "Cache",
    "CacheConsistencyError",
    "CacheMemento",
    "Cell",
    "Direction",
    "EventCategory",
    "GeocoinError",
    "GeolocationUnavailable",
    "Inventory",
    "LatLng",
    "MalformedSnapshot",
    "PersistedSnapshot",
    "PlayerState",
    "Token",
    "WorldMemory",
    "WorldState",
]
