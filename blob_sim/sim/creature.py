# blob_sim/sim/creature.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .behaviors import dist, should_replace, steering_direction
from .config import CREATURE
from .genetics import Mutatable
from .models import CreatureState, Objective, ObjectiveIntensity, Vec
from .rng import RNG


def _default_speed() -> Mutatable:
    return Mutatable(CREATURE.speed, CREATURE.speed_mutation_rate)

def _transition(current: CreatureState, new: CreatureState) -> CreatureState:
    # DEAD is terminal
    if current is CreatureState.DEAD:
        return current
    return new


@dataclass
class Creature:
    """
    One blob. Built with just a position, everything else comes from the
    CREATURE template; snapshots pass the full field set back in.

    Reproduction and aging return new Creature values, the parent is never
    touched.
    """
    pos: Vec

    # mutatable
    speed: Mutatable = field(default_factory=_default_speed)  # how far can it move in one step?
    sense_range: float = CREATURE.sense_range                  # how far can it see?
    reach: float = CREATURE.reach                              # how far can it interact with something?
    life_span: int = CREATURE.life_span

    # physiology
    foods_eaten: int = 0
    energy: float = CREATURE.start_energy
    age: int = 0

    home_pos: Optional[Vec] = None
    movement_history: List[Vec] = field(default_factory=list)

    state: CreatureState = CreatureState.ACTIVE
    target: Optional[Objective] = None

    def __post_init__(self):
        self.pos = (float(self.pos[0]), float(self.pos[1]))
        if self.home_pos is None:
            self.home_pos = self.pos
        if not self.movement_history:
            self.movement_history = [self.pos]

    # ---- lifecycle ----
    def reproduce(self, rng: RNG) -> List[Creature]:
        if not self.will_reproduce():
            return []
        return [Creature(self.home_pos, speed=self.speed.get_mutated(rng))]

    def grow_older(self) -> Optional[Creature]:
        """Same genes, one year older, fresh body at home. None once past life_span."""
        if self.age > self.life_span:
            return None
        return Creature(
            self.home_pos,
            speed=self.speed,
            sense_range=self.sense_range,
            reach=self.reach,
            life_span=self.life_span,
            age=self.age + 1,
        )

    def will_reproduce(self) -> bool:
        return self.foods_eaten >= CREATURE.reproduce_min_foods

    # ---- state ----
    def is_alive(self) -> bool:
        return self.state is not CreatureState.DEAD

    def is_active(self) -> bool:
        return self.state is CreatureState.ACTIVE

    def sleep(self) -> None:
        self.state = _transition(self.state, CreatureState.ASLEEP)

    # ---- accessors ----
    def get_speed(self) -> float:
        return self.speed.value

    def get_position(self) -> Vec:
        return self.pos

    def get_last_position(self) -> Optional[Vec]:
        if len(self.movement_history) <= 1:
            return None
        return self.movement_history[-2]

    # ---- sensing ----
    def can_see(self, pt: Vec) -> bool:
        return dist(pt, self.pos) <= self.sense_range

    def can_reach(self, pt: Vec) -> bool:
        return dist(pt, self.pos) <= self.reach

    # ---- objectives ----
    def add_objective(self, target_pos: Vec, intensity: ObjectiveIntensity) -> None:
        if should_replace(self.target, intensity):
            self.target = Objective(target_pos, intensity)

    def reset_objective(self) -> None:
        self.target = None

    def get_direction(self) -> Vec:
        return steering_direction(self.pos, self.target, self.get_last_position())

    # ---- movement / energy ----
    def move_to(self, pos: Vec) -> None:
        """Record the move, then pay for it (speed based, not distance based)."""
        self.pos = (float(pos[0]), float(pos[1]))
        self.movement_history.append(self.pos)
        self.apply_energy_cost(self.get_motion_energy_cost())

    def get_motion_energy_cost(self) -> float:
        return CREATURE.motion_cost_coeff * self.get_speed() ** 2

    def apply_energy_cost(self, cost: float) -> None:
        self.energy -= cost
        if self.energy <= 0:
            self.state = _transition(self.state, CreatureState.DEAD)

    def eat_food(self) -> None:
        self.foods_eaten += 1
