"""Collaborator contracts consumed by the controller.

Rendering and location hardware live outside the engine; anything that
implements these protocols can be attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from geocoin.core.models import LatLng
    from geocoin.systems.materializer import CacheView

LocationCallback = Callable[[float, float], None]


class RenderSurface(Protocol):
    def add_cache_region(self, view: CacheView) -> None: ...

    def clear_cache_regions(self) -> None: ...

    def set_player_marker(self, position: LatLng) -> None: ...

    def set_trail(self, points: list[LatLng]) -> None: ...

    def center_on(self, position: LatLng) -> None: ...


class GeolocationSource(Protocol):
    @property
    def available(self) -> bool: ...

    def watch(self, callback: LocationCallback) -> None:
        """Deliver every future (lat, lng) fix to *callback*.

        Raises GeolocationUnavailable if the host has no location capability.
        """
        ...
