"""Player state: position, inventory, movement trail."""

from __future__ import annotations

from dataclasses import dataclass, field

from geocoin.core.inventory import Inventory
from geocoin.core.models import Cell, LatLng


@dataclass(slots=True)
class PlayerState:
    """Mutable player fields. ``cell`` is kept in step with ``position`` by the controller."""

    position: LatLng
    cell: Cell
    inventory: Inventory = field(default_factory=Inventory)
    trail: list[LatLng] = field(default_factory=list)

    @classmethod
    def starting_at(cls, position: LatLng, cell: Cell) -> PlayerState:
        return cls(position=position, cell=cell, inventory=Inventory(), trail=[position])

    def move_to(self, position: LatLng, cell: Cell) -> bool:
        """Relocate and extend the trail. Returns True when the cell changed."""
        changed = cell != self.cell
        self.position = position
        self.cell = cell
        self.trail.append(position)
        return changed
