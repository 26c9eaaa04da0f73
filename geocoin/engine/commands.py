"""Commands: the only way state changes reach the controller."""

from __future__ import annotations

from dataclasses import dataclass

from geocoin.core.enums import Direction


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction


@dataclass(frozen=True, slots=True)
class UpdateLocation:
    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class Collect:
    cell_key: str


@dataclass(frozen=True, slots=True)
class Deposit:
    cell_key: str


@dataclass(frozen=True, slots=True)
class Save:
    pass


@dataclass(frozen=True, slots=True)
class Load:
    pass


@dataclass(frozen=True, slots=True)
class Reset:
    pass


@dataclass(frozen=True, slots=True)
class EnableGeolocation:
    pass


Command = Move | UpdateLocation | Collect | Deposit | Save | Load | Reset | EnableGeolocation


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    message: str = ""

    def __repr__(self) -> str:
        return f"CommandResult(ok={self.ok}, {self.message!r})"
