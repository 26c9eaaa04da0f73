"""Exception types raised by the world engine."""

from __future__ import annotations


class GeocoinError(Exception):
    """Base class for all engine errors."""


class MalformedSnapshot(GeocoinError):
    """Persisted data exists but does not decode to the expected shape."""


class CacheConsistencyError(GeocoinError):
    """A cache's restored state diverged from the state it was captured from."""


class GeolocationUnavailable(GeocoinError):
    """The host offers no location capability."""
