"""GET /api/v1/config: expose world configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_controller
from geocoin.api.schemas import WorldConfigResponse
from geocoin.engine.controller import GameController

router = APIRouter()


@router.get("/config", response_model=WorldConfigResponse)
def get_config(
    controller: GameController = Depends(get_controller),
) -> WorldConfigResponse:
    cfg = controller.config
    return WorldConfigResponse(
        origin_lat=cfg.origin_lat,
        origin_lng=cfg.origin_lng,
        tile_degrees=cfg.tile_degrees,
        neighborhood_size=cfg.neighborhood_size,
        cache_spawn_probability=cfg.cache_spawn_probability,
        max_initial_tokens=cfg.max_initial_tokens,
        start_lat=cfg.start_lat,
        start_lng=cfg.start_lng,
        autosave_interval_seconds=cfg.autosave_interval_seconds,
    )
