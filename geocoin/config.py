"""World configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorldConfig:
    """Immutable configuration for a game session."""

    # Coordinate system (anchored at Null Island)
    origin_lat: float = 0.0
    origin_lng: float = 0.0
    tile_degrees: float = 0.0001

    # World generation
    oracle_seed: int = 0
    neighborhood_size: int = 8
    cache_spawn_probability: float = 0.1
    max_initial_tokens: int = 5

    # Player start (Oakes College classroom)
    start_lat: float = 36.98949379578401
    start_lng: float = -122.06277128548504

    # Persistence
    storage_path: str = "geocoin_state.json"
    storage_key: str = "geocoinState"
    autosave_interval_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"
