"""Cache endpoints: inspect visible caches and move coins in and out."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from geocoin.api.dependencies import get_controller
from geocoin.api.schemas import CacheSchema, CommandResponse
from geocoin.api.serializers import cache_schema, command_response
from geocoin.engine.commands import Collect, Deposit
from geocoin.engine.controller import GameController

router = APIRouter(prefix="/caches")


@router.get("", response_model=list[CacheSchema])
def list_caches(controller: GameController = Depends(get_controller)) -> list[CacheSchema]:
    with controller.lock:
        return [cache_schema(v) for v in controller.visible_caches()]


@router.get("/{cell_key}", response_model=CacheSchema)
def get_cache(cell_key: str, controller: GameController = Depends(get_controller)) -> CacheSchema:
    with controller.lock:
        view = controller.world.view_for(cell_key)
        if view is None:
            raise HTTPException(status_code=404, detail=f"No cache at {cell_key} in view.")
        return cache_schema(view)


@router.post("/{cell_key}/collect", response_model=CommandResponse)
def collect(cell_key: str, controller: GameController = Depends(get_controller)) -> CommandResponse:
    with controller.lock:
        if controller.world.view_for(cell_key) is None:
            raise HTTPException(status_code=404, detail=f"No cache at {cell_key} in view.")
        result = controller.dispatch(Collect(cell_key))
        return command_response(result, controller.world.player)


@router.post("/{cell_key}/deposit", response_model=CommandResponse)
def deposit(cell_key: str, controller: GameController = Depends(get_controller)) -> CommandResponse:
    with controller.lock:
        if controller.world.view_for(cell_key) is None:
            raise HTTPException(status_code=404, detail=f"No cache at {cell_key} in view.")
        result = controller.dispatch(Deposit(cell_key))
        return command_response(result, controller.world.player)
