"""Engine systems: hash oracle, grid mapping, materialization, storage."""

from geocoin.systems.grid_mapper import GridMapper
from geocoin.systems.materializer import CacheView, ViewportMaterializer
from geocoin.systems.oracle import HashOracle
from geocoin.systems.storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = ["CacheView", "GridMapper", "HashOracle", "JsonFileStore", "KeyValueStore", "MemoryStore", "ViewportMaterializer"]
