"""Delivery packages and their priority ordering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Package:
    """A package to deliver to ``(x, y)``.

    Packages order by priority. Between equal priorities the one with the
    lower id ranks higher. Equality and hashing use the id alone.
    """

    id: int
    x: int = 0
    y: int = 0
    weight: float = 0.0
    priority: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.id > other.id

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        if self.priority != other.priority:
            return self.priority > other.priority
        return self.id < other.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)