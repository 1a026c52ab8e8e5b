"""Tests for directions, cities and the world graph."""

import random

import pytest

from invasion.world import City, CityParseError, Direction, World


def build_world(*lines: str) -> World:
    world = World()
    for number, line in enumerate(lines, start=1):
        city = City.parse(line)
        city.original_line_number = number
        world.add(city)
    return world


def test_direction_parse_is_case_insensitive():
    assert Direction.parse("north") is Direction.NORTH
    assert Direction.parse("East") is Direction.EAST
    assert Direction.parse("SOUTH") is Direction.SOUTH
    assert str(Direction.WEST) == "west"


def test_direction_parse_rejects_unknown_values():
    assert Direction.parse("up") is None
    assert Direction.parse("") is None
    # The sentinel is never produced by parsing.
    assert Direction.parse("unknown") is None


def test_city_parse_and_format():
    city = City.parse("Foo north=Bar west=Baz south=Qu-ux")
    assert city.name == "Foo"
    assert city.neighbors == {
        "Bar": Direction.NORTH,
        "Baz": Direction.WEST,
        "Qu-ux": Direction.SOUTH,
    }
    assert str(city) == "Foo north=Bar west=Baz south=Qu-ux"


def test_city_without_neighbors():
    city = City.parse("Lonely")
    assert city.neighbors == {}
    assert str(city) == "Lonely"


@pytest.mark.parametrize(
    "line, fragment",
    [
        ("", "empty string"),
        ("   ", "empty string"),
        ("Foo north", "expected format <direction>=<city-name>"),
        ("Foo up=Bar", "failed to parse direction from string 'up'"),
        ("Foo  north=Bar", "from '': expected format"),
    ],
)
def test_city_parse_errors(line, fragment):
    with pytest.raises(CityParseError) as excinfo:
        City.parse(line)
    assert fragment in str(excinfo.value)


def test_city_parse_trims_surrounding_whitespace_only():
    city = City.parse("  Foo north=Bar \r\n")
    assert city.name == "Foo"
    assert city.neighbors == {"Bar": Direction.NORTH}


def test_random_neighbor_only_picks_real_neighbors():
    city = City.parse("A north=Z east=B south=C")
    city.set_real_neighbors_from_ghosts({"Z"})
    rng = random.Random(3)

    picks = {city.random_neighbor(rng)[0] for _ in range(200)}
    assert picks == {"B", "C"}


def test_random_neighbor_without_real_neighbors():
    city = City.parse("A north=Z")
    city.set_real_neighbors_from_ghosts({"Z"})
    assert city.random_neighbor(random.Random(0)) == ("", Direction.UNKNOWN)


def test_find_ghost_cities_and_real_neighbors():
    world = build_world("A north=Z east=B", "B west=A south=Y")

    ghosts = world.find_ghost_cities()
    assert ghosts == {"Z", "Y"}
    # Pure query: nothing changes until real neighbors are materialized.
    assert world.get("A").real_neighbors == {}

    world.set_real_neighbors(ghosts)
    assert world.get("A").real_neighbors == {"B": Direction.EAST}
    assert world.get("A").neighbors == {"Z": Direction.NORTH, "B": Direction.EAST}
    assert world.get("B").real_neighbors == {"A": Direction.WEST}


def test_remove_city_retracts_edges_everywhere():
    world = build_world("A east=B", "B west=A east=C", "C west=B")
    world.set_real_neighbors(world.find_ghost_cities())

    removed = world.remove_city("B")

    assert removed is not None and removed.name == "B"
    assert "B" not in world
    assert len(world) == 2
    for city in world:
        assert "B" not in city.neighbors
        assert "B" not in city.real_neighbors
    assert world.remove_city("B") is None


def test_duplicate_city_names_overwrite():
    world = build_world("A east=B", "A west=C")
    assert len(world) == 1
    assert world.get("A").neighbors == {"C": Direction.WEST}
    assert world.get("A").original_line_number == 2


def test_render_lists_cities_and_aliens():
    world = build_world("A east=B", "B west=A")
    world.get("B").aliens = [1, 2]

    rendered = world.render()
    assert rendered.startswith("🌐 World:")
    assert "B west=A [1, 2]" in rendered
    assert "A east=B []" in rendered


def test_render_empty_world():
    assert "All cities have been destroyed! 😱" in World().render()


def test_to_state_orders_cities_by_input_line():
    world = World()
    second = City.parse("B west=A")
    second.original_line_number = 2
    first = City.parse("A east=B")
    first.original_line_number = 1
    world.add(second)
    world.add(first)

    state = world.to_state()
    assert [city.name for city in state.cities] == ["A", "B"]
    assert state.cities[0].neighbors == {"B": "east"}
