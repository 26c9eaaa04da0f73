"""FastAPI dependency injection: provides the GameController and geolocation feed."""

from __future__ import annotations

from geocoin.api.geolocation import PushGeolocationSource
from geocoin.engine.controller import GameController

_controller: GameController | None = None
_geolocation: PushGeolocationSource | None = None


def set_controller(controller: GameController | None, geolocation: PushGeolocationSource | None = None) -> None:
    global _controller, _geolocation
    _controller = controller
    _geolocation = geolocation


def get_controller() -> GameController:
    if _controller is None:
        raise RuntimeError("GameController not initialized; server not started correctly.")
    return _controller


def get_geolocation_source() -> PushGeolocationSource:
    if _geolocation is None:
        raise RuntimeError("Geolocation feed not initialized; server not started correctly.")
    return _geolocation
