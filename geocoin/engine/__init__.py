"""Engine layer: controller, commands, persistence gateway, autosave."""

from geocoin.engine.autosave import AutosaveTimer
from geocoin.engine.controller import GameController
from geocoin.engine.persistence import PersistenceGateway

__all__ = ["AutosaveTimer", "GameController", "PersistenceGateway"]
