"""Tests for objective resolution and steering direction."""

import itertools
import math

import pytest

from blob_sim.sim.behaviors import offer_objectives, steering_direction
from blob_sim.sim.creature import Creature
from blob_sim.sim.models import Food, Objective, ObjectiveIntensity as OI


def _is_unit(v):
    return math.isclose(math.hypot(*v), 1.0)


class TestObjectives:
    def test_first_offer_always_taken(self):
        c = Creature((0.0, 0.0))
        c.add_objective((1.0, 1.0), OI.MINOR_CRAVING)
        assert c.target == Objective((1.0, 1.0), OI.MINOR_CRAVING)

    def test_stronger_offer_replaces(self):
        c = Creature((0.0, 0.0))
        c.add_objective((1.0, 1.0), OI.MINOR_CRAVING)
        c.add_objective((2.0, 2.0), OI.MINOR_AVERSION)
        assert c.target.point == (2.0, 2.0)

    def test_tie_keeps_earlier(self):
        c = Creature((0.0, 0.0))
        c.add_objective((1.0, 1.0), OI.MAJOR_CRAVING)
        c.add_objective((2.0, 2.0), OI.MAJOR_CRAVING)
        assert c.target.point == (1.0, 1.0)

    def test_offer_order_does_not_matter(self):
        offers = [
            ((1.0, 0.0), OI.MODERATE_CRAVING),
            ((0.0, 1.0), OI.VITAL_CRAVING),
            ((5.0, 5.0), OI.MINOR_AVERSION),
            ((2.0, 2.0), OI.MAJOR_AVERSION),
        ]
        for perm in itertools.permutations(offers):
            c = Creature((0.0, 0.0))
            for pt, intensity in perm:
                c.add_objective(pt, intensity)
            assert c.target == Objective((0.0, 1.0), OI.VITAL_CRAVING)

    def test_reset(self):
        c = Creature((0.0, 0.0))
        c.add_objective((1.0, 1.0), OI.VITAL_AVERSION)
        c.reset_objective()
        assert c.target is None
        c.add_objective((3.0, 3.0), OI.MINOR_CRAVING)
        assert c.target.point == (3.0, 3.0)


class TestDirection:
    def test_fresh_creature_heads_along_x(self):
        assert Creature((7.0, -2.0)).get_direction() == (1.0, 0.0)

    def test_craving_then_weaker_aversion(self):
        c = Creature((0.0, 0.0))
        c.add_objective((10.0, 0.0), OI.MODERATE_CRAVING)
        assert c.get_direction() == (1.0, 0.0)
        c.add_objective((0.0, -10.0), OI.MINOR_AVERSION)
        assert c.target.intensity is OI.MODERATE_CRAVING
        assert c.get_direction() == (1.0, 0.0)

    def test_aversion_flees(self):
        c = Creature((0.0, 0.0))
        c.add_objective((3.0, 4.0), OI.MAJOR_AVERSION)
        assert c.get_direction() == pytest.approx((-0.6, -0.8))

    def test_craving_pursues_normalized(self):
        c = Creature((1.0, 1.0))
        c.add_objective((4.0, 5.0), OI.MINOR_CRAVING)
        d = c.get_direction()
        assert d == pytest.approx((0.6, 0.8))
        assert _is_unit(d)

    def test_aversion_on_top_of_us_uses_last_move(self):
        c = Creature((0.0, 0.0))
        c.move_to((0.0, 2.0))
        c.add_objective((0.0, 2.0), OI.VITAL_AVERSION)
        assert c.get_direction() == (0.0, 1.0)

    def test_no_target_keeps_heading(self):
        c = Creature((0.0, 0.0))
        c.move_to((-1.0, -1.0))
        d = c.get_direction()
        assert d == pytest.approx((-math.sqrt(0.5), -math.sqrt(0.5)))
        assert _is_unit(d)

    def test_standing_still_falls_back_to_x_axis(self):
        c = Creature((0.0, 0.0))
        c.move_to((0.0, 1.0))
        c.move_to((0.0, 1.0))
        assert c.get_direction() == (1.0, 0.0)

    def test_zero_target_and_zero_history(self):
        c = Creature((1.0, 0.0))
        c.move_to((1.0, 0.0))
        c.add_objective((1.0, 0.0), OI.MINOR_CRAVING)
        assert c.get_direction() == (1.0, 0.0)

    def test_direction_is_pure(self):
        c = Creature((0.0, 0.0))
        c.add_objective((0.0, 5.0), OI.MINOR_CRAVING)
        c.get_direction()
        assert c.movement_history == [(0.0, 0.0)]
        assert c.target.point == (0.0, 5.0)

    def test_steering_function_directly(self):
        assert steering_direction((0.0, 0.0), None, None) == (1.0, 0.0)
        assert steering_direction((2.0, 0.0), None, (0.0, 0.0)) == (1.0, 0.0)


class TestOfferObjectives:
    def test_hungry_creature_craves_visible_food(self, empty_world):
        empty_world.food = [Food(x=20.0, y=0.0, id=1), Food(x=90.0, y=90.0, id=2)]
        c = Creature((0.0, 0.0))
        offer_objectives(empty_world, c, [c])
        assert c.target == Objective((20.0, 0.0), OI.MAJOR_CRAVING)

    def test_fed_creature_heads_home(self, empty_world):
        empty_world.food = [Food(x=20.0, y=0.0, id=1)]
        c = Creature((0.0, 0.0))
        c.move_to((10.0, 0.0))
        c.eat_food()
        c.eat_food()
        offer_objectives(empty_world, c, [c])
        assert c.target == Objective((0.0, 0.0), OI.MAJOR_CRAVING)

    def test_low_energy_makes_home_vital(self, empty_world):
        c = Creature((0.0, 0.0), energy=50.0, foods_eaten=1)
        c.move_to((100.0, 0.0))
        offer_objectives(empty_world, c, [c])
        assert c.target == Objective((0.0, 0.0), OI.VITAL_CRAVING)

    def test_crowding_aversion(self, empty_world):
        me = Creature((50.0, 50.0))
        other = Creature((52.0, 50.0))
        far = Creature((90.0, 90.0))
        offer_objectives(empty_world, me, [me, other, far])
        assert me.target == Objective((52.0, 50.0), OI.MINOR_AVERSION)
        assert me.get_direction() == (-1.0, 0.0)

    def test_stale_objective_cleared(self, empty_world):
        c = Creature((0.0, 0.0))
        c.add_objective((5.0, 5.0), OI.VITAL_AVERSION)
        offer_objectives(empty_world, c, [c])
        assert c.target is None
