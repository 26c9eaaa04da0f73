"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CellSchema(BaseModel):
    i: int
    j: int


class PositionSchema(BaseModel):
    lat: float
    lng: float


class TokenSchema(BaseModel):
    serial: int
    home_cell: CellSchema
    label: str


class CacheSchema(BaseModel):
    key: str
    cell: CellSchema
    south_west: PositionSchema
    north_east: PositionSchema
    description: str
    tokens: list[TokenSchema] = Field(default_factory=list)


class PlayerSchema(BaseModel):
    cell: CellSchema
    position: PositionSchema
    inventory: list[TokenSchema] = Field(default_factory=list)
    status: str
    trail: list[PositionSchema] = Field(default_factory=list)


class WorldStateResponse(BaseModel):
    player: PlayerSchema
    caches: list[CacheSchema] = Field(default_factory=list)
    remembered_caches: int = 0
    geolocation_enabled: bool = False


class CommandResponse(BaseModel):
    status: str  # "ok" | "noop"
    message: str = ""
    player_cell: CellSchema


class LocationUpdate(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class EventSchema(BaseModel):
    seq: int
    category: str
    message: str


class WorldConfigResponse(BaseModel):
    origin_lat: float
    origin_lng: float
    tile_degrees: float
    neighborhood_size: int
    cache_spawn_probability: float
    max_initial_tokens: int
    start_lat: float
    start_lng: float
    autosave_interval_seconds: float
