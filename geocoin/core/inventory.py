"""Player inventory: an ordered stack of tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from geocoin.core.models import Token


@dataclass(slots=True)
class Inventory:
    """Mutable LIFO token container. The last pushed token is the first popped."""

    tokens: list[Token] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    @property
    def empty(self) -> bool:
        return not self.tokens

    def push(self, token: Token) -> None:
        self.tokens.append(token)

    def pop(self) -> Token | None:
        """Remove and return the top token, or None when empty."""
        if not self.tokens:
            return None
        return self.tokens.pop()

    def peek(self) -> Token | None:
        return self.tokens[-1] if self.tokens else None

    def labels(self) -> list[str]:
        return [t.label for t in self.tokens]

    def summary(self) -> str:
        """Status-panel text, e.g. ``Coins: 369894:-1220628#0, 369894:-1220628#1``."""
        return f"Coins: {', '.join(self.labels())}"
