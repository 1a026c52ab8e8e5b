"""
Invasion - mad aliens destroying a world of cities.

Aliens land on random cities and keep jumping to random neighbors; a city
hosting two or more aliens at once is destroyed along with them.

No file I/O inside the engine. No global random state.
World, alien count, event callback and RNG are injected by the caller.
"""

__version__ = "0.1.0"

from .engine import EXHAUSTION_THRESHOLD, Invasion, ValidationError
from .schemas import InvasionSnapshot, InvasionState
from .world import (
    City,
    CityState,
    Direction,
    World,
    WorldFormatError,
    WorldState,
    format_world,
    parse_world,
    read_world,
    write_world,
)

__all__ = [
    # Engine
    "Invasion",
    "ValidationError",
    "EXHAUSTION_THRESHOLD",
    # Invasion schemas
    "InvasionState",
    "InvasionSnapshot",
    # World model
    "City",
    "CityState",
    "Direction",
    "World",
    "WorldState",
    # World text format
    "WorldFormatError",
    "parse_world",
    "read_world",
    "format_world",
    "write_world",
]
