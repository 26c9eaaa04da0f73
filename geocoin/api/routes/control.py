"""POST /api/v1/control/{action}, /move/{direction}, /location: player and session controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_controller, get_geolocation_source
from geocoin.api.geolocation import PushGeolocationSource
from geocoin.api.schemas import CommandResponse, LocationUpdate
from geocoin.api.serializers import command_response
from geocoin.core.enums import Direction
from geocoin.engine.commands import CommandResult, EnableGeolocation, Load, Move, Reset, Save
from geocoin.engine.controller import GameController

router = APIRouter()


class ControlAction(str, Enum):
    save = "save"
    load = "load"
    reset = "reset"
    geolocation = "geolocation"


@router.post("/control/{action}", response_model=CommandResponse)
def control(
    action: ControlAction,
    controller: GameController = Depends(get_controller),
) -> CommandResponse:
    match action:
        case ControlAction.save:
            result = controller.dispatch(Save())
        case ControlAction.load:
            result = controller.dispatch(Load())
        case ControlAction.reset:
            result = controller.dispatch(Reset())
        case ControlAction.geolocation:
            result = controller.dispatch(EnableGeolocation())
    return command_response(result, controller.world.player)


@router.post("/move/{direction}", response_model=CommandResponse)
def move(
    direction: Direction,
    controller: GameController = Depends(get_controller),
) -> CommandResponse:
    result = controller.dispatch(Move(direction))
    return command_response(result, controller.world.player)


@router.post("/location", response_model=CommandResponse)
def push_location(
    fix: LocationUpdate,
    controller: GameController = Depends(get_controller),
    source: PushGeolocationSource = Depends(get_geolocation_source),
) -> CommandResponse:
    if not source.push(fix.lat, fix.lng):
        result = CommandResult(False, "Geolocation not enabled.")
    else:
        result = CommandResult(True, f"Location updated to {fix.lat:.6f}, {fix.lng:.6f}.")
    return command_response(result, controller.world.player)
