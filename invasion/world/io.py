"""Reading and writing worlds in the line-oriented text format.

Each line describes one city followed by its outgoing edges::

    Foo north=Bar west=Baz south=Qu-ux
    Bar south=Foo west=Bee

The line position (1-based) becomes the city's ``original_line_number`` and
the serializer writes cities back in that order, leaving out destroyed ones.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .city import City, CityParseError
from .world import World


class WorldFormatError(ValueError):
    """Raised when a world description cannot be parsed."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"failed to parse city from line {line_number} '{line}': {message}"
        super().__init__(message)


def parse_world(lines: Iterable[str], *, source: str = "<input>") -> World:
    """Build a world from an iterable of city lines.

    Raises:
        WorldFormatError: If any line is malformed or no city is found.
    """
    world = World()
    line_number = 0
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            city = City.parse(line)
        except CityParseError as exc:
            raise WorldFormatError(str(exc), line_number=line_number, line=line) from exc
        city.original_line_number = line_number
        world.add(city)

    if not len(world):
        raise WorldFormatError(f"no city has been found in '{source}'")
    return world


def read_world(path: Path | str) -> World:
    """Read a world from ``path``.

    Raises:
        OSError: If the file cannot be opened.
        WorldFormatError: If its content is not a valid world.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as handle:
        return parse_world(handle, source=str(path))


def format_world(world: World) -> str:
    """Serialize the remaining cities, one per line, in original input order."""
    return "".join(f"{city}\n" for city in world.ordered_cities())


def write_world(world: World, path: Path | str) -> None:
    """Write ``world`` to ``path``, replacing any existing content."""
    Path(path).write_text(format_world(world), encoding="utf-8")
