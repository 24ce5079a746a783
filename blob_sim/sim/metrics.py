# blob_sim/sim/metrics.py
from __future__ import annotations
from typing import List, Dict
import os
import csv

import numpy as np

from .creature import Creature

def summarize_generation(generation: int, population: List[Creature]) -> Dict[str, float]:
    alive = sum(1 for c in population if c.is_alive())
    asleep = sum(1 for c in population if c.is_alive() and not c.is_active())
    ate0 = sum(1 for c in population if c.foods_eaten == 0)
    ate1 = sum(1 for c in population if c.foods_eaten == 1)
    ate2p = sum(1 for c in population if c.foods_eaten >= 2)

    speeds = np.array([c.get_speed() for c in population], dtype=float)
    if speeds.size:
        spd_min, spd_med, spd_max = (float(v) for v in np.percentile(speeds, [0, 50, 100]))
        avg_speed = float(speeds.mean())
        avg_energy = float(np.mean([c.energy for c in population]))
        avg_age = float(np.mean([c.age for c in population]))
    else:
        spd_min = spd_med = spd_max = avg_speed = avg_energy = avg_age = float("nan")

    return dict(
        generation=generation, n=len(population), alive=alive, asleep=asleep,
        ate0=ate0, ate1=ate1, ate2p=ate2p,
        avg_speed=avg_speed, speed_min=spd_min, speed_median=spd_med, speed_max=spd_max,
        avg_energy=avg_energy, avg_age=avg_age,
    )

def append_csv(path: str, row: Dict[str, float]) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        if write_header:
            w.writeheader()
        w.writerow(row)
