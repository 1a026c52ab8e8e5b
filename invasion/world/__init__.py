"""World model: cities, directions and the text format they are read from."""

from .city import City, CityParseError
from .direction import Direction
from .io import WorldFormatError, format_world, parse_world, read_world, write_world
from .schemas import CityState, WorldState
from .world import World

__all__ = [
    "City",
    "CityParseError",
    "CityState",
    "Direction",
    "World",
    "WorldFormatError",
    "WorldState",
    "format_world",
    "parse_world",
    "read_world",
    "write_world",
]
