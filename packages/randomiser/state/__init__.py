"""
State module - Run-scoped randomiser state and RNG.

Contains:
- RNG system (XorShift128, seed management)
- Biome registry with per-run usage counters
- Progression state and graph
- Placement records and the distribution store
"""

# RNG System
from .rng import XorShift128, Random, seed_to_long, long_to_seed, new_seed

# Biome usage
from .registry import BiomeRegistry

# Progression
from .progression import ProgressionState, ProgressionGraph

# Placement records
from .distribution import BiomeSpawn, SpawnData, DistributionStore, to_float32

__all__ = [
    # RNG
    "XorShift128", "Random", "seed_to_long", "long_to_seed", "new_seed",
    # Registry
    "BiomeRegistry",
    # Progression
    "ProgressionState", "ProgressionGraph",
    # Distribution
    "BiomeSpawn", "SpawnData", "DistributionStore", "to_float32",
]
