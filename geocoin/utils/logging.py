"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

# Per-request access lines drown out command and autosave output
NOISY_LOGGERS: tuple[str, ...] = ("uvicorn.access",)


def setup_logging(level: str = "INFO", quiet: tuple[str, ...] = NOISY_LOGGERS) -> None:
    """Route geocoin and server logs to stdout in one line format.

    Loggers named in *quiet* are held at WARNING unless *level* is DEBUG.
    Unknown level names fall back to INFO.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.NOTSET if numeric_level <= logging.DEBUG else logging.WARNING)
