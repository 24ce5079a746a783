# blob_sim/sim/behaviors.py
from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional
import math

from .models import Objective, ObjectiveIntensity, Vec

if TYPE_CHECKING:
    from .creature import Creature
    from .world import World

X_AXIS: Vec = (1.0, 0.0)

# how much spare energy a creature wants before it stops treating home as vital
RETURN_ENERGY_MARGIN = 1.2

# ---------------- vector helpers ----------------
def _sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])

def _mul(v: Vec, k: float) -> Vec:
    return (v[0]*k, v[1]*k)

def _norm(v: Vec) -> float:
    return math.hypot(v[0], v[1])

def _unit(v: Vec) -> Vec:
    n = _norm(v)
    return (0.0, 0.0) if n == 0 else (v[0]/n, v[1]/n)

def dist(a: Vec, b: Vec) -> float:
    return math.hypot(a[0]-b[0], a[1]-b[1])

# ---------------- objective resolution ----------------
def should_replace(current: Optional[Objective], intensity: ObjectiveIntensity) -> bool:
    # ties keep whatever was offered first
    return current is None or intensity > current.intensity

# ---------------- steering ----------------
def objective_displacement(pos: Vec, target: Objective) -> Vec:
    d = _sub(target.point, pos)
    if target.intensity.is_aversion:
        return _mul(d, -1.0)  # other way
    return d

def steering_direction(pos: Vec, target: Optional[Objective], last_pos: Optional[Vec]) -> Vec:
    """
    Unit vector to travel along.
      1. toward the target (away from it for aversions)
      2. else the direction of the last move
      3. else the x axis
    Zero-length candidates fall through to the next rule.
    """
    candidates: List[Optional[Vec]] = [
        objective_displacement(pos, target) if target is not None else None,
        _sub(pos, last_pos) if last_pos is not None else None,
    ]
    for disp in candidates:
        if disp is not None and _norm(disp) > 0.0:
            return _unit(disp)
    return X_AXIS

# ---------------- sensing policy (reference world) ----------------
def hunger_intensity(foods_eaten: int) -> ObjectiveIntensity:
    if foods_eaten == 0:
        return ObjectiveIntensity.MAJOR_CRAVING
    if foods_eaten == 1:
        return ObjectiveIntensity.MODERATE_CRAVING
    return ObjectiveIntensity.MINOR_CRAVING

def energy_to_reach(me: Creature, point: Vec) -> float:
    steps = math.ceil(dist(me.pos, point) / max(me.get_speed(), 1e-6))
    return steps * me.get_motion_energy_cost()

def offer_objectives(world: World, me: Creature, others: List[Creature]) -> None:
    """
    Feed this tick's stimuli to `me`.
      - visible food: craving, more urgent the hungrier it is
      - home: major craving once fed enough to reproduce,
              vital when energy barely covers the trip back
      - nearest other creature within reach: minor aversion (crowding)
    """
    me.reset_objective()

    food = world.nearest_food_within(me.pos, me.sense_range)
    if food is not None:
        me.add_objective(food.pos(), hunger_intensity(me.foods_eaten))

    if me.will_reproduce():
        me.add_objective(me.home_pos, ObjectiveIntensity.MAJOR_CRAVING)
    if me.foods_eaten > 0 and me.energy <= energy_to_reach(me, me.home_pos) * RETURN_ENERGY_MARGIN:
        me.add_objective(me.home_pos, ObjectiveIntensity.VITAL_CRAVING)

    nearest = None
    best_d = me.reach
    for o in others:
        if o is me or not o.is_alive():
            continue
        d = dist(o.pos, me.pos)
        if d <= best_d:
            nearest, best_d = o, d
    if nearest is not None:
        me.add_objective(nearest.pos, ObjectiveIntensity.MINOR_AVERSION)
