"""Geolocation source fed by clients posting their own fixes."""

from __future__ import annotations

import threading

from geocoin.engine.interfaces import LocationCallback


class PushGeolocationSource:
    """Always available; each ``push`` fans a fix out to every watcher."""

    __slots__ = ("_watchers", "_lock")

    def __init__(self) -> None:
        self._watchers: list[LocationCallback] = []
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        return True

    def watch(self, callback: LocationCallback) -> None:
        with self._lock:
            self._watchers.append(callback)

    def push(self, lat: float, lng: float) -> bool:
        """Deliver a fix. Returns False when nobody has subscribed yet."""
        with self._lock:
            watchers = list(self._watchers)
        for callback in watchers:
            callback(lat, lng)
        return bool(watchers)
