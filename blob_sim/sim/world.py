# blob_sim/sim/world.py
from __future__ import annotations
from typing import List, Optional, Tuple

from .behaviors import dist
from .config import WORLD
from .models import Food, Vec
from .rng import RNG


class World:
    def __init__(self, width: float = WORLD.width, height: float = WORLD.height):
        self.width = width
        self.height = height
        self.food: List[Food] = []
        self._food_id = 0

    def _next_food_id(self) -> int:
        self._food_id += 1
        return self._food_id

    def spawn_food_uniform(self, n: int, rng: RNG) -> None:
        self.food = []
        for _ in range(n):
            x = rng.uniform(0.0, self.width)
            y = rng.uniform(0.0, self.height)
            self.food.append(Food(x=x, y=y, id=self._next_food_id()))

    # --- helpers for placement ---
    def random_edge_point(self, rng: RNG) -> Tuple[float, float]:
        side = rng.choice(["left", "right", "top", "bottom"])
        if side == "left":
            return (0.0, rng.uniform(0, self.height))
        if side == "right":
            return (self.width, rng.uniform(0, self.height))
        if side == "top":
            return (rng.uniform(0, self.width), self.height)
        return (rng.uniform(0, self.width), 0.0)

    # --- spatial helpers ---
    def nearest_food_within(self, pos: Vec, radius: float) -> Optional[Food]:
        best = None
        best_d = radius
        for f in self.food:
            d = dist(f.pos(), pos)
            if d <= best_d:
                best = f
                best_d = d
        return best

    def remove_food(self, fid: int) -> None:
        self.food = [f for f in self.food if f.id != fid]

    def clamp_inside(self, x: float, y: float) -> Tuple[float, float]:
        return min(max(x, 0.0), self.width), min(max(y, 0.0), self.height)
