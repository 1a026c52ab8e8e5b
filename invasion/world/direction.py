"""Compass directions used as edge labels between cities."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Direction(Enum):
    """Geographical direction from a city to one of its neighbors.

    ``UNKNOWN`` is a sentinel for "no direction available" and is never
    produced by :meth:`parse`.
    """

    UNKNOWN = "unknown"
    EAST = "east"
    WEST = "west"
    NORTH = "north"
    SOUTH = "south"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Optional["Direction"]:
        """Return the direction named by ``text`` (case-insensitive), or None."""
        try:
            direction = cls(text.strip().lower())
        except ValueError:
            return None
        if direction is cls.UNKNOWN:
            return None
        return direction
