# blob_sim/sim/snapshot.py
"""
JSON snapshots of a population, for saving a run and resuming it later.

Every creature field survives the round trip, including the whole movement
history and the current objective. Points are stored as [x, y] lists,
enums by name.
"""
from __future__ import annotations
from typing import Any, Dict, List, Tuple
import json
import logging
import os

from .creature import Creature
from .genetics import Mutatable
from .models import CreatureState, Objective, ObjectiveIntensity, Vec

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be turned back into creatures."""


def _pt(v: Vec) -> List[float]:
    return [v[0], v[1]]

def _vec(raw: Any) -> Vec:
    x, y = raw
    return (float(x), float(y))

def creature_to_dict(c: Creature) -> Dict[str, Any]:
    return dict(
        speed=dict(value=c.speed.value, rate=c.speed.rate),
        sense_range=c.sense_range,
        reach=c.reach,
        life_span=c.life_span,
        foods_eaten=c.foods_eaten,
        energy=c.energy,
        age=c.age,
        pos=_pt(c.pos),
        home_pos=_pt(c.home_pos),
        movement_history=[_pt(p) for p in c.movement_history],
        state=c.state.name,
        target=None if c.target is None else dict(
            point=_pt(c.target.point),
            intensity=c.target.intensity.name,
        ),
    )

def creature_from_dict(d: Dict[str, Any]) -> Creature:
    try:
        target = d.get("target")
        pos = _vec(d["pos"])
        history = [_vec(p) for p in d["movement_history"]]
        if not history or history[-1] != pos:
            raise ValueError("movement_history must end at pos")
        c = Creature(
            pos,
            speed=Mutatable(float(d["speed"]["value"]), float(d["speed"]["rate"])),
            sense_range=float(d["sense_range"]),
            reach=float(d["reach"]),
            life_span=int(d["life_span"]),
            foods_eaten=int(d["foods_eaten"]),
            energy=float(d["energy"]),
            age=int(d["age"]),
            home_pos=_vec(d["home_pos"]),
            movement_history=history,
            state=CreatureState[d["state"]],
            target=None if target is None else Objective(
                _vec(target["point"]), ObjectiveIntensity[target["intensity"]]
            ),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SnapshotError(f"bad creature record: {e!r}") from e
    return c

def save_population(path: str, population: List[Creature], generation: int) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    doc = dict(
        version=FORMAT_VERSION,
        generation=generation,
        creatures=[creature_to_dict(c) for c in population],
    )
    with open(path, "w") as f:
        json.dump(doc, f)
    logger.info("saved %d creatures (generation %d) to %s", len(population), generation, path)

def load_population(path: str) -> Tuple[int, List[Creature]]:
    with open(path) as f:
        try:
            doc = json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(doc, dict) or doc.get("version") != FORMAT_VERSION:
        raise SnapshotError(f"{path}: unsupported snapshot format")
    records = doc.get("creatures", [])
    if not isinstance(records, list):
        raise SnapshotError(f"{path}: creatures must be a list")
    try:
        generation = int(doc.get("generation", 0))
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"{path}: bad generation {doc.get('generation')!r}") from e
    population = [creature_from_dict(d) for d in records]
    logger.info("loaded %d creatures (generation %d) from %s", len(population), generation, path)
    return generation, population
