"""Enumerations shared across the engine."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Direction(str, Enum):
    """Discrete movement directions (one tile per step)."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@unique
class EventCategory(str, Enum):
    """Categories for the game event feed."""

    MOVE = "move"
    COLLECT = "collect"
    DEPOSIT = "deposit"
    SAVE = "save"
    LOAD = "load"
    RESET = "reset"
    GEOLOCATION = "geolocation"
