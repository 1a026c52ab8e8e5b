"""
Pydantic schemas for invasion bookkeeping.

The engine mutates an ``InvasionState`` in place while it runs; an
``InvasionSnapshot`` bundles that state with the world so the completion
summary can be rendered as JSON.

Design Philosophy:
- Sets only ever grow (destroyed cities, dead aliens, exhausted aliens)
- Aliens are plain integers numbered from 1
- Sets serialize as sorted lists so summaries are stable across runs
"""

from typing import Dict, FrozenSet, List, Set

from pydantic import BaseModel, Field, field_serializer

from invasion.world import WorldState


class InvasionState(BaseModel):
    """Accumulated outcome of an invasion."""

    destroyed_cities: Set[str] = Field(default_factory=set, description="Names of destroyed cities")
    dead_aliens: Set[int] = Field(default_factory=set, description="Aliens killed in a destruction")
    travel_counters: Dict[int, int] = Field(
        default_factory=dict,
        description="Map of alien → number of moves made",
    )
    exhausted_aliens: Set[int] = Field(
        default_factory=set,
        description="Aliens that reached the travel limit; alive but immobile",
    )
    trapped_aliens: Dict[str, List[int]] = Field(
        default_factory=dict,
        description="Map of city → aliens stuck there after its last real neighbor was destroyed",
    )
    ghost_cities: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Neighbor names never declared as cities",
    )
    passes: int = Field(0, description="Advance passes run, settle pass included")
    stalled: bool = Field(False, description="True when the run ended because nothing could move")

    @field_serializer("destroyed_cities", "dead_aliens", "exhausted_aliens", "ghost_cities")
    def _serialize_sorted(self, value):
        return sorted(value)

    def trapped_count(self) -> int:
        return sum(len(aliens) for aliens in self.trapped_aliens.values())

    def trapped_alien_ids(self) -> Set[int]:
        return {alien for aliens in self.trapped_aliens.values() for alien in aliens}


class InvasionSnapshot(BaseModel):
    """Point-in-time view of an invasion, embedded in the completion summary."""

    number_of_aliens: int
    world: WorldState
    state: InvasionState
