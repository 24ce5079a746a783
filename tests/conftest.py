"""Pytest configuration and fixtures for blob_sim tests."""

import pytest

from blob_sim.sim.rng import RNG
from blob_sim.sim.world import World


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return RNG(42)


@pytest.fixture
def empty_world():
    """A 100x100 world with no food in it."""
    return World(width=100.0, height=100.0)
