# blob_sim/sim/rng.py
import random


class RNG:
    """Seedable entropy source handed explicitly to whoever needs randomness."""
    def __init__(self, seed: int | None = None):
        self._r = random.Random(seed)

    def uniform(self, a: float, b: float) -> float:
        return self._r.uniform(a, b)

    def choice(self, seq):
        return self._r.choice(seq)

    def gauss(self, mu: float, sigma: float) -> float:
        return self._r.gauss(mu, sigma)
