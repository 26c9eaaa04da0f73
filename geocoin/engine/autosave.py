"""AutosaveTimer: periodic whole-snapshot saves on a background thread."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from geocoin.engine.commands import Save

if TYPE_CHECKING:
    from geocoin.engine.controller import GameController

logger = logging.getLogger(__name__)


class AutosaveTimer:
    """Dispatches ``Save()`` to the controller every *interval* seconds.

    The save itself runs under the controller lock, so a tick never overlaps
    a user command; a user-triggered save and a tick simply both overwrite
    the same slot.
    """

    def __init__(self, controller: GameController, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self._controller = controller
        self._interval = interval
        self._stop_requested = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop_requested.clear()
        self._thread = threading.Thread(target=self._run_loop, name="autosave", daemon=True)
        self._thread.start()
        logger.info("Autosave started (every %.1fs)", self._interval)

    def stop(self) -> None:
        self._stop_requested.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        self._thread = None
        logger.info("Autosave stopped.")

    def tick(self) -> bool:
        """Run one save immediately."""
        return self._controller.dispatch(Save()).ok

    def _run_loop(self) -> None:
        while not self._stop_requested.wait(self._interval):
            self.tick()
