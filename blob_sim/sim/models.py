# blob_sim/sim/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Tuple

Vec = Tuple[float, float]


class CreatureState(Enum):
    DEAD = "dead"
    ASLEEP = "asleep"
    ACTIVE = "active"


@total_ordering
class ObjectiveIntensity(Enum):
    # Meh level
    MINOR_CRAVING = "minor_craving"
    MINOR_AVERSION = "minor_aversion"
    # Kind of want this
    MODERATE_CRAVING = "moderate_craving"
    MODERATE_AVERSION = "moderate_aversion"
    # Seriously starving
    MAJOR_CRAVING = "major_craving"
    MAJOR_AVERSION = "major_aversion"
    # Will die unless this happens
    VITAL_CRAVING = "vital_craving"
    VITAL_AVERSION = "vital_aversion"

    @property
    def rank(self) -> int:
        return INTENSITY_RANK[self]

    @property
    def is_aversion(self) -> bool:
        return self in _AVERSIONS

    def __lt__(self, other):
        if not isinstance(other, ObjectiveIntensity):
            return NotImplemented
        return self.rank < other.rank


# Comparison goes through this table, never through declaration order.
INTENSITY_RANK: Dict[ObjectiveIntensity, int] = {
    ObjectiveIntensity.MINOR_CRAVING: 1,
    ObjectiveIntensity.MINOR_AVERSION: 2,
    ObjectiveIntensity.MODERATE_CRAVING: 3,
    ObjectiveIntensity.MODERATE_AVERSION: 4,
    ObjectiveIntensity.MAJOR_CRAVING: 5,
    ObjectiveIntensity.MAJOR_AVERSION: 6,
    ObjectiveIntensity.VITAL_CRAVING: 7,
    ObjectiveIntensity.VITAL_AVERSION: 8,
}

_AVERSIONS = frozenset({
    ObjectiveIntensity.MINOR_AVERSION,
    ObjectiveIntensity.MODERATE_AVERSION,
    ObjectiveIntensity.MAJOR_AVERSION,
    ObjectiveIntensity.VITAL_AVERSION,
})


@dataclass(frozen=True)
class Objective:
    """Current target of a creature's desire and how badly it wants it."""
    point: Vec
    intensity: ObjectiveIntensity


@dataclass
class Food:
    x: float
    y: float
    id: int

    def pos(self) -> Vec:
        return (self.x, self.y)
