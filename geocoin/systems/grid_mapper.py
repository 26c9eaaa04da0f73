"""Continuous position <-> discrete cell quantization."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from geocoin.core.models import Cell, LatLng

if TYPE_CHECKING:
    from geocoin.config import WorldConfig


class GridMapper:
    """Maps lat/lng to cells by floor division of the offset from a fixed origin.

    ``to_cell(to_position(c)) == c`` for every cell; the reverse direction is
    lossy because positions are quantized to the cell's south-west corner.
    """

    __slots__ = ("_origin", "_tile")

    def __init__(self, tile_degrees: float = 0.0001, origin: LatLng | None = None) -> None:
        if tile_degrees <= 0:
            raise ValueError("tile_degrees must be > 0")
        self._tile = tile_degrees
        self._origin = origin or LatLng(0.0, 0.0)

    @classmethod
    def from_config(cls, config: WorldConfig) -> GridMapper:
        return cls(config.tile_degrees, LatLng(config.origin_lat, config.origin_lng))

    @property
    def tile_degrees(self) -> float:
        return self._tile

    @property
    def origin(self) -> LatLng:
        return self._origin

    def to_cell(self, lat: float, lng: float) -> Cell:
        i = math.floor((lat - self._origin.lat) / self._tile)
        j = math.floor((lng - self._origin.lng) / self._tile)
        cell = Cell(i, j)
        # Float division can land one cell off at exact tile boundaries
        return self._snap(cell, lat, lng)

    def to_position(self, cell: Cell) -> LatLng:
        """South-west corner of *cell*."""
        return LatLng(self._origin.lat + cell.i * self._tile, self._origin.lng + cell.j * self._tile)

    def bounds(self, cell: Cell) -> tuple[LatLng, LatLng]:
        """(south-west, north-east) corners of *cell*."""
        return self.to_position(cell), self.to_position(cell.offset(1, 1))

    def center(self, cell: Cell) -> LatLng:
        sw = self.to_position(cell)
        return sw.shifted(self._tile / 2, self._tile / 2)

    def _snap(self, cell: Cell, lat: float, lng: float) -> Cell:
        i, j = cell.i, cell.j
        if self._origin.lat + i * self._tile > lat:
            i -= 1
        elif self._origin.lat + (i + 1) * self._tile <= lat:
            i += 1
        if self._origin.lng + j * self._tile > lng:
            j -= 1
        elif self._origin.lng + (j + 1) * self._tile <= lng:
            j += 1
        return Cell(i, j)
