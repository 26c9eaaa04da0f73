"""Persisted snapshot: the durable, textual form of a whole session.

Layout (JSON)::

    {
      "version": 1,
      "playerCell": {"i": 369894, "j": -1220628},
      "playerInventory": [{"serial": 0, "homeCell": {"i": 1, "j": 2}}],
      "worldMemoryStore": {"1:2": [{"serial": 1, "homeCell": {"i": 1, "j": 2}}]},
      "movementTrail": [[36.98949, -122.06277]]
    }

Parsing goes through pydantic models so a truncated or foreign payload fails
as a whole with MalformedSnapshot instead of yielding half-typed values.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from geocoin.core.cache import CacheMemento
from geocoin.core.errors import MalformedSnapshot
from geocoin.core.models import Cell, LatLng, Token

if TYPE_CHECKING:
    from geocoin.core.world_state import WorldState

SNAPSHOT_VERSION = 1


# ---------------------------------------------------------------------------
# Wire schema
# ---------------------------------------------------------------------------

class CellModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    i: StrictInt
    j: StrictInt

    def to_cell(self) -> Cell:
        return Cell(self.i, self.j)


class TokenModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    serial: StrictInt = Field(ge=0)
    homeCell: CellModel

    def to_token(self) -> Token:
        return Token(serial=self.serial, home_cell=self.homeCell.to_cell())


class SnapshotModel(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    version: int = SNAPSHOT_VERSION
    playerCell: CellModel
    playerInventory: list[TokenModel] = Field(default_factory=list)
    worldMemoryStore: dict[str, list[TokenModel]] = Field(default_factory=dict)
    movementTrail: list[tuple[float, float]] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def _known_version(cls, v: int) -> int:
        if v != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported snapshot version {v}")
        return v

    @field_validator("worldMemoryStore")
    @classmethod
    def _cell_keys(cls, v: dict[str, list[TokenModel]]) -> dict[str, list[TokenModel]]:
        for key in v:
            Cell.from_key(key)
        return v


# ---------------------------------------------------------------------------
# Domain snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PersistedSnapshot:
    """Immutable capture of player state and every cache memento."""

    player_cell: Cell
    inventory: tuple[Token, ...] = ()
    caches: dict[Cell, CacheMemento] = field(default_factory=dict)
    trail: tuple[LatLng, ...] = ()

    @classmethod
    def from_world(cls, world: WorldState) -> PersistedSnapshot:
        player = world.player
        return cls(
            player_cell=player.cell,
            inventory=tuple(player.inventory.tokens),
            caches=world.memory.mementos(),
            trail=tuple(player.trail),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "playerCell": self.player_cell.to_dict(),
            "playerInventory": [t.to_dict() for t in self.inventory],
            "worldMemoryStore": {cell.key: m.to_list() for cell, m in self.caches.items()},
            "movementTrail": [p.to_pair() for p in self.trail],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> PersistedSnapshot:
        try:
            model = SnapshotModel.model_validate_json(text)
        except ValidationError as exc:
            raise MalformedSnapshot(f"snapshot does not match the expected shape: {exc.error_count()} error(s)") from exc
        return cls(
            player_cell=model.playerCell.to_cell(),
            inventory=tuple(t.to_token() for t in model.playerInventory),
            caches={
                Cell.from_key(key): CacheMemento(tokens=tuple(t.to_token() for t in tokens))
                for key, tokens in model.worldMemoryStore.items()
            },
            trail=tuple(LatLng(lat, lng) for lat, lng in model.movementTrail),
        )
