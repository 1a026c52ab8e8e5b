"""The invasion world: cities keyed by name.

Cities reference each other by name only. Removing a city is therefore a
dictionary delete plus a sweep that retracts the name from every remaining
city's neighbor maps, and references to names that were never declared as
cities ("ghost cities") need no special storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterator, List, Optional, Set

from .city import City
from .schemas import WorldState

_CITY_ICONS = ["🌆", "🏙 ", "🌇", "🌃", "🌁", "🌉"]


@dataclass
class World:
    """Mapping from city name to :class:`City`, in insertion order."""

    cities: Dict[str, City] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.cities)

    def __contains__(self, name: object) -> bool:
        return name in self.cities

    def __iter__(self) -> Iterator[City]:
        return iter(self.cities.values())

    def get(self, name: str) -> Optional[City]:
        return self.cities.get(name)

    def add(self, city: City) -> None:
        """Insert ``city``; a city with the same name is silently replaced."""
        self.cities[city.name] = city

    def ordered_cities(self) -> List[City]:
        """Return the cities sorted by their original input position."""
        return sorted(self.cities.values(), key=lambda city: city.original_line_number)

    def find_ghost_cities(self) -> Set[str]:
        """Return neighbor names that do not exist as cities in this world.

        This happens when the world is inconsistently defined, e.g. ``A
        north=Z`` without any line declaring ``Z``.
        """
        ghosts: Set[str] = set()
        for city in self.cities.values():
            for neighbor in city.neighbors:
                if neighbor not in self.cities:
                    ghosts.add(neighbor)
        return ghosts

    def set_real_neighbors(self, ghost_cities: AbstractSet[str]) -> None:
        for city in self.cities.values():
            city.set_real_neighbors_from_ghosts(ghost_cities)

    def remove_city(self, name: str) -> Optional[City]:
        """Delete ``name`` and retract it from every remaining city's neighbors.

        Returns the removed city, or None if no such city exists.
        """
        removed = self.cities.pop(name, None)
        if removed is None:
            return None
        for city in self.cities.values():
            city.remove_neighbor(name)
        return removed

    def render(self) -> str:
        """Human-readable rendering used in invasion events."""
        lines = ["🌐 World:", "-----------"]
        if not self.cities:
            lines.append("All cities have been destroyed! 😱")
        for index, city in enumerate(self.ordered_cities()):
            icon = _CITY_ICONS[index % len(_CITY_ICONS)]
            lines.append(f"{icon} {city} {city.aliens}")
        lines.append("===========")
        return "\n".join(lines)

    def to_state(self) -> WorldState:
        return WorldState(cities=[city.to_state() for city in self.ordered_cities()])
