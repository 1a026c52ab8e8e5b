"""City nodes of the invasion world."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional, Tuple

from .direction import Direction
from .schemas import CityState


class CityParseError(ValueError):
    """Raised when a city line does not follow ``<name> <direction>=<name> ...``."""


@dataclass
class City:
    """A named node holding its outgoing edges and the aliens currently in it.

    Neighbors are referenced by name only; the owning :class:`World` resolves
    them. Some neighbor names may not exist as cities ("ghosts"), which is why
    ``real_neighbors`` is kept alongside ``neighbors``.
    """

    name: str
    neighbors: Dict[str, Direction] = field(default_factory=dict)
    original_line_number: int = 0
    aliens: List[int] = field(default_factory=list)
    real_neighbors: Dict[str, Direction] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [self.name]
        parts.extend(f"{direction}={neighbor}" for neighbor, direction in self.neighbors.items())
        return " ".join(parts)

    @classmethod
    def parse(cls, text: str) -> "City":
        """Build a city from its textual representation.

        Raises:
            CityParseError: If the line is empty, a token lacks ``=`` or a
                direction is not one of east/west/north/south.
        """
        text = text.strip()
        if not text:
            raise CityParseError("failed to parse city: empty string")

        # Tokens are separated by exactly one space; runs of spaces yield empty tokens.
        words = text.split(" ")
        city = cls(name=words[0])
        for word in words[1:]:
            direction_text, sep, neighbor = word.partition("=")
            if not sep:
                raise CityParseError(
                    f"failed to parse direction and neighbor city from '{word}': "
                    "expected format <direction>=<city-name>"
                )
            direction = Direction.parse(direction_text)
            if direction is None:
                raise CityParseError(
                    f"failed to parse direction from string '{direction_text}'"
                )
            city.neighbors[neighbor] = direction
        return city

    def set_real_neighbors_from_ghosts(self, ghost_cities: AbstractSet[str]) -> None:
        """Keep in ``real_neighbors`` only the neighbors that are not ghosts."""
        self.real_neighbors = {
            name: direction
            for name, direction in self.neighbors.items()
            if name not in ghost_cities
        }

    def random_neighbor(self, rng: random.Random) -> Tuple[str, Direction]:
        """Pick a real neighbor uniformly at random.

        Returns ``("", Direction.UNKNOWN)`` when there is nowhere to go.
        """
        if not self.real_neighbors:
            return "", Direction.UNKNOWN
        name = rng.choice(list(self.real_neighbors))
        return name, self.real_neighbors[name]

    def remove_neighbor(self, neighbor: str) -> Optional[Direction]:
        """Drop ``neighbor`` from both neighbor maps; return its former real direction."""
        self.neighbors.pop(neighbor, None)
        return self.real_neighbors.pop(neighbor, None)

    def to_state(self) -> CityState:
        return CityState(
            name=self.name,
            neighbors={name: str(direction) for name, direction in self.neighbors.items()},
            real_neighbors=list(self.real_neighbors),
            aliens=list(self.aliens),
            original_line_number=self.original_line_number,
        )
