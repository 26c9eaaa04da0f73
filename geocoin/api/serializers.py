"""Domain -> schema conversion shared by the route modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geocoin.api.schemas import (
    CacheSchema,
    CellSchema,
    CommandResponse,
    PlayerSchema,
    PositionSchema,
    TokenSchema,
)

if TYPE_CHECKING:
    from geocoin.core.models import Cell, LatLng, Token
    from geocoin.core.player import PlayerState
    from geocoin.engine.commands import CommandResult
    from geocoin.systems.materializer import CacheView


def cell_schema(cell: Cell) -> CellSchema:
    return CellSchema(i=cell.i, j=cell.j)


def position_schema(pos: LatLng) -> PositionSchema:
    return PositionSchema(lat=pos.lat, lng=pos.lng)


def token_schema(token: Token) -> TokenSchema:
    return TokenSchema(serial=token.serial, home_cell=cell_schema(token.home_cell), label=token.label)


def cache_schema(view: CacheView) -> CacheSchema:
    return CacheSchema(
        key=view.key,
        cell=cell_schema(view.cell),
        south_west=position_schema(view.south_west),
        north_east=position_schema(view.north_east),
        description=view.describe(),
        tokens=[token_schema(t) for t in view.cache.tokens],
    )


def player_schema(player: PlayerState, include_trail: bool = True) -> PlayerSchema:
    return PlayerSchema(
        cell=cell_schema(player.cell),
        position=position_schema(player.position),
        inventory=[token_schema(t) for t in player.inventory],
        status=player.inventory.summary(),
        trail=[position_schema(p) for p in player.trail] if include_trail else [],
    )


def command_response(result: CommandResult, player: PlayerState) -> CommandResponse:
    return CommandResponse(
        status="ok" if result.ok else "noop",
        message=result.message,
        player_cell=cell_schema(player.cell),
    )
