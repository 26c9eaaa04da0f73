"""Core data models: Cell, LatLng, Token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from geocoin.core.enums import Direction


@dataclass(frozen=True, slots=True, order=True)
class Cell:
    """Immutable discrete grid coordinate (i = latitude row, j = longitude column)."""

    i: int = 0
    j: int = 0

    @property
    def key(self) -> str:
        """Stable string key used by the world memory and the persisted snapshot."""
        return f"{self.i}:{self.j}"

    @classmethod
    def from_key(cls, key: str) -> Cell:
        i_str, sep, j_str = key.partition(":")
        if not sep:
            raise ValueError(f"cell key must look like 'i:j', got {key!r}")
        return cls(int(i_str), int(j_str))

    def offset(self, di: int, dj: int) -> Cell:
        return Cell(self.i + di, self.j + dj)

    def to_dict(self) -> dict[str, int]:
        return {"i": self.i, "j": self.j}

    def __repr__(self) -> str:
        return f"Cell({self.i}, {self.j})"


@dataclass(frozen=True, slots=True)
class LatLng:
    """Continuous position in degrees."""

    lat: float
    lng: float

    def shifted(self, dlat: float, dlng: float) -> LatLng:
        return LatLng(self.lat + dlat, self.lng + dlng)

    def to_pair(self) -> list[float]:
        return [self.lat, self.lng]


@dataclass(frozen=True, slots=True)
class Token:
    """A coin: unique by (home_cell, serial), never mutated after generation."""

    serial: int
    home_cell: Cell

    @property
    def label(self) -> str:
        return f"{self.home_cell.i}:{self.home_cell.j}#{self.serial}"

    def to_dict(self) -> dict[str, Any]:
        return {"serial": self.serial, "homeCell": self.home_cell.to_dict()}

    def __repr__(self) -> str:
        return f"Token({self.label})"


# Cell offsets (di, dj) for one step in each direction
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.SOUTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}
