"""
Content module - Static randomiser data definitions.

Contains biomes, fragments, progression rules and alternate starts.
"""

# Biomes
from .biomes import Zone, Biome, ZONE_DEPTHS, VANILLA_BIOMES

# Fragments
from .fragments import (
    Fragment, PlaceableItem,
    FRAGMENT_DATA_PATHS, DEFAULT_PREFAB_FILES, FRAGMENT_ITEMS,
    build_class_id_table, reverse_class_ids,
)

# Progression
from .progression import UnlockRule, UNLOCKED_BY, UNLOCK_RULES, DEPTH_GRANTS

# Alternate starts
from .starts import (
    SpawnBox, ALTERNATE_STARTS, START_ALIASES, MODE_ALIASES, START_HEIGHT,
    REACHABLE_START_DEPTH, VANILLA_MODE_PREFIX, RANDOM_MODE, CHAOTIC_MODE,
)

__all__ = [
    # Biomes
    "Zone", "Biome", "ZONE_DEPTHS", "VANILLA_BIOMES",
    # Fragments
    "Fragment", "PlaceableItem",
    "FRAGMENT_DATA_PATHS", "DEFAULT_PREFAB_FILES", "FRAGMENT_ITEMS",
    "build_class_id_table", "reverse_class_ids",
    # Progression
    "UnlockRule", "UNLOCKED_BY", "UNLOCK_RULES", "DEPTH_GRANTS",
    # Alternate starts
    "SpawnBox", "ALTERNATE_STARTS", "START_ALIASES", "MODE_ALIASES", "START_HEIGHT",
    "REACHABLE_START_DEPTH", "VANILLA_MODE_PREFIX", "RANDOM_MODE", "CHAOTIC_MODE",
]
