# blob_sim/sim/genetics.py
from __future__ import annotations
from dataclasses import dataclass

from .config import MUTATION
from .rng import RNG


def derive_mutated(value: float, rate: float, rng: RNG) -> float:
    """
    Child trait value from a parent value.
    Gaussian noise with sd = rate, clipped to +/- MUTATION.max_sigmas * rate.
    No domain limits are applied to the result.
    """
    noise = rng.gauss(0.0, rate)
    bound = MUTATION.max_sigmas * rate
    return value + min(max(noise, -bound), bound)


@dataclass(frozen=True)
class Mutatable:
    """A heritable trait value paired with its mutation rate."""
    value: float
    rate: float

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError(f"mutation rate must be >= 0, got {self.rate}")

    def get_mutated(self, rng: RNG) -> Mutatable:
        # rate is inherited as-is; only the value drifts
        return Mutatable(derive_mutated(self.value, self.rate, rng), self.rate)
