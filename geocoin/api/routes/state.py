"""GET /api/v1/state: player and visible caches (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from geocoin.api.dependencies import get_controller
from geocoin.api.schemas import EventSchema, WorldStateResponse
from geocoin.api.serializers import cache_schema, player_schema
from geocoin.engine.controller import GameController

router = APIRouter()


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    include_trail: bool = Query(True, description="Include the full movement trail"),
    controller: GameController = Depends(get_controller),
) -> WorldStateResponse:
    with controller.lock:
        world = controller.world
        return WorldStateResponse(
            player=player_schema(world.player, include_trail=include_trail),
            caches=[cache_schema(v) for v in world.materialized.values()],
            remembered_caches=len(world.memory),
            geolocation_enabled=controller.geolocation_enabled,
        )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    since: int = Query(0, ge=0, description="Only return events with seq >= since"),
    controller: GameController = Depends(get_controller),
) -> list[EventSchema]:
    return [
        EventSchema(seq=e.seq, category=e.category, message=e.message)
        for e in controller.event_log.since(since)
    ]
