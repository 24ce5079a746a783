# blob_sim/sim/engine.py
from __future__ import annotations
from typing import List
import logging

from .behaviors import _mul, dist, offer_objectives
from .config import WORLD
from .creature import Creature
from .models import Vec
from .rng import RNG
from .world import World

logger = logging.getLogger(__name__)


def spawn_population(world: World, n: int, rng: RNG) -> List[Creature]:
    """Fresh creatures with homes on the world border."""
    return [Creature(world.random_edge_point(rng)) for _ in range(n)]

def _next_position(world: World, me: Creature) -> Vec:
    step = me.get_speed()
    t = me.target
    if t is not None and not t.intensity.is_aversion:
        # don't overshoot something we want
        step = min(step, dist(me.pos, t.point))
    dx, dy = _mul(me.get_direction(), step)
    return world.clamp_inside(me.pos[0] + dx, me.pos[1] + dy)

def _consume_food_if_reached(world: World, me: Creature) -> None:
    f = world.nearest_food_within(me.pos, me.reach)
    if f is not None:
        me.eat_food()
        world.remove_food(f.id)

def step_creature(world: World, me: Creature, population: List[Creature]) -> None:
    """One tick for one creature: sense, steer, move, eat, maybe go to sleep."""
    if not me.is_active():
        return

    offer_objectives(world, me, population)
    me.move_to(_next_position(world, me))
    if not me.is_alive():
        logger.debug("creature from %s starved at %s", me.home_pos, me.pos)
        return

    _consume_food_if_reached(world, me)

    if me.will_reproduce() and me.can_reach(me.home_pos):
        me.sleep()

def simulate_generation(world: World, population: List[Creature], rng: RNG,
                        steps: int | None = None, n_food: int | None = None) -> int:
    """
    Scatter food and tick every creature until the step budget runs out or
    nobody is active anymore. Returns the number of ticks run.
    """
    steps = int(WORLD.steps_per_generation if steps is None else steps)
    world.spawn_food_uniform(int(WORLD.n_food if n_food is None else n_food), rng)

    for tick in range(steps):
        if not any(c.is_active() for c in population):
            return tick
        for me in population:
            step_creature(world, me, population)
    return steps

def next_generation(population: List[Creature], rng: RNG) -> List[Creature]:
    """
    Dead creatures drop out. Survivors contribute their offspring and an
    aged copy of themselves (unless past their life span).
    """
    new_population: List[Creature] = []
    for c in population:
        if not c.is_alive():
            continue
        kids = c.reproduce(rng)
        if kids:
            logger.debug("creature from %s had %d child(ren)", c.home_pos, len(kids))
        older = c.grow_older()
        if older is None:
            logger.debug("creature from %s reached end of life at age %d", c.home_pos, c.age)
        else:
            new_population.append(older)
        new_population.extend(kids)
    return new_population
