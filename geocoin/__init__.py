"""Deterministic location-grid coin caches: world generation, lifecycle and persistence."""

__version__ = "0.1.0"
