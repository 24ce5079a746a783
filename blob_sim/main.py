# blob_sim/main.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import List

from .sim.config import SIM, WORLD
from .sim.engine import next_generation, simulate_generation, spawn_population
from .sim.metrics import append_csv, summarize_generation
from .sim.rng import RNG
from .sim.snapshot import SnapshotError, load_population, save_population
from .sim.world import World

logger = logging.getLogger(__name__)


def run(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Blob evolution: headless generations of foraging creatures")
    parser.add_argument("--generations", type=int, default=SIM.generations)
    parser.add_argument("--seed", type=int, default=SIM.seed)
    parser.add_argument("--pop", type=int, default=SIM.initial_population)
    parser.add_argument("--food", type=int, default=WORLD.n_food)
    parser.add_argument("--steps", type=int, default=WORLD.steps_per_generation)
    parser.add_argument("--csv", type=str, default=SIM.track_csv)
    parser.add_argument("--snapshot", type=str, default=SIM.snapshot_path,
                        help="write the final population to this JSON file")
    parser.add_argument("--resume", type=str, default=None,
                        help="start from a population saved with --snapshot")
    parser.add_argument("--log-level", type=str, default=SIM.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    rng = RNG(args.seed)
    world = World()

    first_gen = 1
    if args.resume:
        try:
            done, population = load_population(args.resume)
        except (OSError, SnapshotError) as e:
            print(f"[ERROR] could not resume from {args.resume}: {e}", file=sys.stderr)
            return 1
        first_gen = done + 1
    else:
        population = spawn_population(world, args.pop, rng)

    generation = first_gen - 1
    for generation in range(first_gen, first_gen + args.generations):
        ticks = simulate_generation(world, population, rng, steps=args.steps, n_food=args.food)

        summary = summarize_generation(generation, population)
        print(
            f"Gen {generation:3d} | N={summary['n']:3.0f} "
            f"alive={summary['alive']:3.0f} asleep={summary['asleep']:3.0f} "
            f"ate0={summary['ate0']:3.0f} ate1={summary['ate1']:3.0f} ate2+={summary['ate2p']:3.0f} "
            f"avg_speed={summary['avg_speed']:.3f} ticks={ticks}"
        )
        if args.csv:
            append_csv(args.csv, summary)

        population = next_generation(population, rng)
        if len(population) == 0:
            logger.warning("population went extinct after generation %d, reseeding", generation)
            population = spawn_population(world, args.pop, rng)

    if args.snapshot:
        save_population(args.snapshot, population, generation)
    return 0


if __name__ == "__main__":
    sys.exit(run())
