"""Pydantic schemas for the invasion world.

These models mirror the lightweight dataclasses in ``city.py`` and
``world.py`` but keep world snapshots serializable, so the completion
summary can embed the world as JSON.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class CityState(BaseModel):
    """Serializable view of a single city."""

    name: str
    neighbors: Dict[str, str] = Field(
        default_factory=dict,
        description="Map of neighbor name → direction, as authored",
    )
    real_neighbors: List[str] = Field(
        default_factory=list,
        description="Neighbor names that exist as cities",
    )
    aliens: List[int] = Field(default_factory=list, description="Aliens currently in the city")
    original_line_number: int = Field(0, description="1-based position in the input file")


class WorldState(BaseModel):
    """Serializable view of the remaining cities, in input order."""

    cities: List[CityState] = Field(default_factory=list)
