"""Cache entities and their mementos.

A Cache is the logical owner of a stack of tokens bound to one cell. It exists
in the world memory whether or not it is currently materialized; the memento
is the durable form used both for rematerialization and for persistence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from geocoin.core.inventory import Inventory
from geocoin.core.models import Cell, Token


@dataclass(frozen=True, slots=True)
class CacheMemento:
    """Opaque snapshot of a cache's token stack (bottom first)."""

    tokens: tuple[Token, ...] = ()

    def to_list(self) -> list[dict[str, Any]]:
        return [t.to_dict() for t in self.tokens]


@dataclass(slots=True)
class Cache:
    """Mutable token stack at a single cell."""

    cell: Cell
    tokens: list[Token] = field(default_factory=list)

    @classmethod
    def create(cls, cell: Cell, token_count: int) -> Cache:
        """Generate ``token_count`` fresh tokens with serials 0..n-1 stamped with *cell*."""
        if token_count < 0:
            raise ValueError("token_count must be >= 0")
        return cls(cell=cell, tokens=[Token(serial=s, home_cell=cell) for s in range(token_count)])

    def __len__(self) -> int:
        return len(self.tokens)

    # -- memento --

    def capture(self) -> CacheMemento:
        return CacheMemento(tokens=tuple(self.tokens))

    def restore(self, memento: CacheMemento) -> None:
        """Replace the token stack wholesale with the memento's contents."""
        self.tokens = list(memento.tokens)

    # -- transfers --

    def collect(self, inventory: Inventory) -> bool:
        """Move the top token from this cache onto *inventory*."""
        if not self.tokens:
            return False
        inventory.push(self.tokens.pop())
        return True

    def deposit(self, inventory: Inventory) -> bool:
        """Move the top token from *inventory* onto this cache."""
        token = inventory.pop()
        if token is None:
            return False
        self.tokens.append(token)
        return True

    def labels(self) -> list[str]:
        return [t.label for t in self.tokens]

    def describe(self) -> str:
        return f"Cache at {self.cell.i},{self.cell.j} with {len(self.tokens)} coins."
