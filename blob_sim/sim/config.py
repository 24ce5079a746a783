# blob_sim/sim/config.py
from dataclasses import dataclass

# ------------------------------------------------------------
# CREATURE DEFAULTS (construction template)
# ------------------------------------------------------------
@dataclass(frozen=True)
class CreatureConfig:
    speed: float = 1.0
    speed_mutation_rate: float = 0.1
    sense_range: float = 50.0
    reach: float = 5.0
    life_span: int = 4
    start_energy: float = 100.0
    motion_cost_coeff: float = 0.5   # cost = coeff * speed^2 per move
    reproduce_min_foods: int = 2     # will_reproduce() <=> foods_eaten >= this

# ------------------------------------------------------------
# MUTATION
# ------------------------------------------------------------
@dataclass(frozen=True)
class MutationConfig:
    max_sigmas: float = 3.0   # noise clipped to +/- max_sigmas * rate

# ------------------------------------------------------------
# REFERENCE WORLD
# ------------------------------------------------------------
@dataclass(frozen=False)  # mutable so the CLI can tweak sizes at runtime
class WorldConfig:
    width: float = 500.0
    height: float = 500.0
    n_food: int = 60
    steps_per_generation: int = 200

# ------------------------------------------------------------
# HEADLESS SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)
class SimConfig:
    seed: int = 42
    initial_population: int = 20
    generations: int = 30
    track_csv: str | None = "runs/summary.csv"
    snapshot_path: str | None = None
    log_level: str = "INFO"

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
CREATURE = CreatureConfig()
MUTATION = MutationConfig()
WORLD = WorldConfig()
SIM = SimConfig()
