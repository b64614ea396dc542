"""
Subnautica-style fragment randomiser.

Redistributes blueprint fragments and the lifepod start across the
world's biomes, reproducibly from a seed.

Core subsystems:
- state: RNG (XorShift128), biome registry, progression, distribution store
- content: Biomes, fragments, progression rules, alternate starts
- generation: Fragment placement and start selection
- randomiser: The run driver and its debounced trigger

Usage:
    from packages.randomiser import Randomiser, RandomiserConfig, load_static_data

    config = RandomiserConfig(seed=1234, spawn_point="Random")
    store = Randomiser(config, load_static_data()).randomise()
    for item, spawn_data in store.spawn_data.items():
        print(item, spawn_data.biomes())
"""

__version__ = "0.1.0"

from .errors import RandomiserError, ConfigurationError, InfeasibleConstraintError
from .config import RandomiserConfig, CONFIG_BOUNDS
from .data import StaticData, load_static_data, load_static_data_async
from .persistence import SaveFile, encode, decode, SAVE_VERSION
from .randomiser import Randomiser, RunTrigger, SeedPolicy, MAX_SEARCH_DEPTH

from .state import (
    Random, seed_to_long, long_to_seed,
    BiomeRegistry, ProgressionState, ProgressionGraph,
    BiomeSpawn, SpawnData, DistributionStore,
)
from .content import Zone, Biome, Fragment, PlaceableItem, SpawnBox
from .generation import FragmentPlacer, StartSelector, StartPoint, split_probability

__all__ = [
    # Errors
    "RandomiserError", "ConfigurationError", "InfeasibleConstraintError",
    # Config
    "RandomiserConfig", "CONFIG_BOUNDS",
    # Data
    "StaticData", "load_static_data", "load_static_data_async",
    # Persistence
    "SaveFile", "encode", "decode", "SAVE_VERSION",
    # Driver
    "Randomiser", "RunTrigger", "SeedPolicy", "MAX_SEARCH_DEPTH",
    # State
    "Random", "seed_to_long", "long_to_seed",
    "BiomeRegistry", "ProgressionState", "ProgressionGraph",
    "BiomeSpawn", "SpawnData", "DistributionStore",
    # Content
    "Zone", "Biome", "Fragment", "PlaceableItem", "SpawnBox",
    # Generation
    "FragmentPlacer", "StartSelector", "StartPoint", "split_probability",
]
