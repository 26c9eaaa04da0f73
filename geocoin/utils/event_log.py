"""Thread-safe event log for the game event feed."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single applied command, as shown in the status feed."""

    seq: int
    category: str
    message: str


class EventLog:
    """Unbounded event log. Writers append; readers snapshot a slice.

    All events are kept until manually cleared via ``clear()``.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self) -> None:
        self._buffer: deque[GameEvent] = deque()
        self._lock = threading.Lock()
        self._next_seq = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def record(self, category: str, message: str) -> GameEvent:
        with self._lock:
            event = GameEvent(seq=self._next_seq, category=category, message=message)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[GameEvent]:
        """Return all events with seq >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
