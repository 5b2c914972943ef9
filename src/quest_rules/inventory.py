"""Remaining object counts in the game world."""

from __future__ import annotations

from typing import Mapping

from .errors import ResourceExhaustedError


class WorldInventory:
    """Per-object ledger of units still available in the world."""

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts: dict[str, int] = {}
        for name, count in (counts or {}).items():
            if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                raise ValueError(f"Initial count for {name!r} must be an integer >= 0, got {count!r}")
            self._counts[name] = count

    def remaining(self, name: str) -> int:
        return self._counts.get(name, 0)

    def has(self, name: str) -> bool:
        return self.remaining(name) > 0

    def consume_one(self, name: str) -> None:
        """Remove one unit of ``name`` from the world."""
        if not self.has(name):
            raise ResourceExhaustedError(name)
        self._counts[name] -= 1

    def snapshot(self) -> dict[str, int]:
        return dict(self._counts)
