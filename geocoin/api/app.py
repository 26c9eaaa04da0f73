"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geocoin.api.dependencies import set_controller
from geocoin.api.geolocation import PushGeolocationSource
from geocoin.api.routes import api_router
from geocoin.config import WorldConfig
from geocoin.engine.autosave import AutosaveTimer
from geocoin.engine.commands import Save
from geocoin.engine.controller import GameController
from geocoin.systems.storage import JsonFileStore
from geocoin.utils.logging import setup_logging

if TYPE_CHECKING:
    from geocoin.systems.storage import KeyValueStore

logger = logging.getLogger(__name__)


def create_app(config: WorldConfig | None = None, store: KeyValueStore | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = WorldConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        geolocation = PushGeolocationSource()
        controller = GameController(
            _config,
            store if store is not None else JsonFileStore(_config.storage_path),
            geolocation=geolocation,
        )
        controller.start_session()
        set_controller(controller, geolocation)
        autosave = AutosaveTimer(controller, _config.autosave_interval_seconds)
        autosave.start()
        logger.info("API server started, player at %s.", controller.world.player.cell.key)
        yield
        autosave.stop()
        controller.dispatch(Save())
        set_controller(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Geocoin World Engine",
        description=(
            "Deterministic location-grid coin caches.\n\n"
            "## API Groups\n\n"
            "- **State**: Player position, inventory, trail and visible caches\n"
            "- **Caches**: Inspect visible caches; collect and deposit coins\n"
            "- **Control**: Movement, geolocation fixes, save / load / reset\n"
            "- **Config**: Read-only world configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Live player and viewport state polled by the client."},
            {"name": "Caches", "description": "Caches currently materialized around the player."},
            {"name": "Control", "description": "Discrete moves, geolocation, and persistence controls."},
            {"name": "Config", "description": "Read-only world parameters (tile size, spawn probability, etc.)."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
