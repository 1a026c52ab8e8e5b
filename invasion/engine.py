"""
Invasion engine.

Owns a world for the duration of a run and drives the invasion:
1. Land the aliens on uniformly random cities
2. Settle pass: destroy cities where aliens landed together, no movement
3. Teleporting passes: every lone alien jumps to a random real neighbor,
   cities holding two or more aliens are destroyed on the spot
4. Stop as soon as the completion predicate holds

Every state change is reported synchronously through the ``on_event``
callback. Randomness comes from an injected ``random.Random`` so runs can be
reproduced from a seed.
"""

import random
from typing import Callable, List, Optional

from .schemas import InvasionSnapshot, InvasionState
from .world import City, World

# Number of moves after which an alien is too exhausted to travel again.
EXHAUSTION_THRESHOLD = 10000


# =============================
# Module-level Exceptions
# =============================

class ValidationError(ValueError):
    """Raised when an invasion is created with invalid arguments.

    ``problems`` lists every violated condition, not just the first one.
    """

    def __init__(self, problems: List[str]) -> None:
        self.problems = problems
        super().__init__("invalid args: " + ", ".join(problems))


def join_aliens(aliens: List[int]) -> str:
    """Format alien ids as "alien 1, alien 2 and alien 3"."""
    names = [f"alien {alien}" for alien in aliens]
    if len(names) < 2:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


class Invasion:
    """
    Invasion of a world by a fixed number of aliens.

    Not thread-safe: the world and the RNG are mutated in place, and the
    event callback runs inline with every mutation.
    """

    def __init__(
        self,
        world: World,
        number_of_aliens: int,
        on_event: Optional[Callable[[str], None]],
        *,
        rng: Optional[random.Random] = None,
    ):
        """Validate arguments and prepare the world for landing.

        Args:
            world: Cities to invade; the invasion takes ownership of it
            number_of_aliens: Aliens to land, numbered 1..number_of_aliens
            on_event: Called with a human-readable message for every event
            rng: Randomness source (defaults to an unseeded ``random.Random``)

        Raises:
            ValidationError: If the world is empty, the alien count is not
                positive or the callback is missing.
        """
        problems = []
        if world is None or not len(world):
            problems.append("world must not be empty")
        if number_of_aliens <= 0:
            problems.append("number of aliens must be greater than zero")
        if on_event is None:
            problems.append("event callback must not be None")
        if problems:
            raise ValidationError(problems)

        self.world = world
        self.number_of_aliens = number_of_aliens
        self.rng = rng or random.Random()
        self._on_event = on_event
        self._original_city_count = len(world)
        # Set whenever a pass moves an alien or destroys a city.
        self._changed = False

        ghost_cities = world.find_ghost_cities()
        world.set_real_neighbors(ghost_cities)
        self.state = InvasionState(ghost_cities=frozenset(ghost_cities))

    # ------------------------------------------------------------------
    # Top-level run
    # ------------------------------------------------------------------

    def run(self) -> str:
        """Run the invasion to completion and return the summary message.

        The summary is also emitted as the last event.
        """
        self.land_aliens()
        if self.is_complete() or self.advance(allow_teleport=False):
            return self._finish("Invasion complete right after aliens landing!")

        while True:
            if self.advance(allow_teleport=True):
                return self._finish("Invasion complete!")
            if not self._changed:
                # Nothing moved and nothing was destroyed, so no later pass can differ.
                self.state.stalled = True
                return self._finish("Invasion stalled, no alien can move anymore!")

    def _finish(self, headline: str) -> str:
        message = f"{headline} State of the world:\n{self.snapshot().model_dump_json(indent=2)}"
        self._emit(message)
        return message

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def land_aliens(self) -> None:
        """Drop aliens 1..N on uniformly random cities (with replacement)."""
        cities = list(self.world)
        buckets: List[List[int]] = [[] for _ in cities]
        for alien in range(1, self.number_of_aliens + 1):
            buckets[self.rng.randrange(len(cities))].append(alien)

        for city, aliens in zip(cities, buckets):
            city.aliens = aliens

        self._emit(f"Aliens landed! State of the world:\n{self.world.render()}")

    def advance(self, allow_teleport: bool) -> bool:
        """Run one pass over the cities; return True once the invasion is complete."""
        self.state.passes += 1
        self._changed = False

        for city in list(self.world):
            if city.name not in self.world:
                # Destroyed earlier in this pass.
                continue

            if len(city.aliens) > 1:
                self.destroy_city(city)
            elif city.aliens and allow_teleport and city.real_neighbors:
                neighbor, _ = city.random_neighbor(self.rng)
                destination = self.world.get(neighbor)
                if destination is not None and self.teleport_alien(city, destination):
                    if len(destination.aliens) > 1:
                        self.destroy_city(destination)

            if self.is_complete():
                return True

        return False

    def teleport_alien(self, from_city: City, to_city: City) -> bool:
        """Move the front alien of ``from_city`` to ``to_city``.

        Exhausted aliens stay where they are; returns whether a move happened.
        """
        alien = from_city.aliens[0]
        if alien in self.state.exhausted_aliens:
            return False

        from_city.aliens.pop(0)
        to_city.aliens.append(alien)
        travels = self.state.travel_counters.get(alien, 0) + 1
        self.state.travel_counters[alien] = travels
        if travels >= EXHAUSTION_THRESHOLD:
            self.state.exhausted_aliens.add(alien)
        self._changed = True

        self._emit(
            f"Alien {alien} has traveled from {from_city.name} (aliens: {from_city.aliens}) "
            f"to {to_city.name} (aliens: {to_city.aliens})"
        )
        return True

    def destroy_city(self, city: City) -> None:
        """Remove ``city`` from the world, killing every alien in it.

        Cities that lose their last real neighbor this way trap the aliens
        they still hold.
        """
        former_neighbors_of = [
            other.name for other in self.world
            if other is not city and city.name in other.real_neighbors
        ]
        self.world.remove_city(city.name)

        self.state.destroyed_cities.add(city.name)
        self.state.dead_aliens.update(city.aliens)
        self.state.trapped_aliens.pop(city.name, None)
        self._changed = True

        for name in former_neighbors_of:
            other = self.world.get(name)
            if other is not None and not other.real_neighbors and other.aliens:
                self.state.trapped_aliens[name] = list(other.aliens)

        self._emit(f"{city.name} has been destroyed by {join_aliens(city.aliens)}!")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_complete(self) -> bool:
        """Whether the invasion is over.

        The alien tally stops one alien short of a full accounting.
        """
        if len(self.state.destroyed_cities) >= self._original_city_count:
            return True
        accounted = (
            len(self.state.dead_aliens)
            + len(self.state.exhausted_aliens)
            + self.state.trapped_count()
        )
        return accounted + 1 >= self.number_of_aliens

    def snapshot(self) -> InvasionSnapshot:
        return InvasionSnapshot(
            number_of_aliens=self.number_of_aliens,
            world=self.world.to_state(),
            state=self.state,
        )

    def _emit(self, message: str) -> None:
        self._on_event(message)
