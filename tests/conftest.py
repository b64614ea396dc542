"""
Shared pytest fixtures for the randomiser test suite.

This module provides reusable fixtures for:
- RNG with known seeds
- Small hand-built biome tables
- Configs, registries, progression and placers wired together
"""

import pytest
import sys

# Ensure project root is in path
import os
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from packages.randomiser.config import RandomiserConfig
from packages.randomiser.content.biomes import Biome, Zone
from packages.randomiser.content.fragments import Fragment, PlaceableItem
from packages.randomiser.data import load_static_data
from packages.randomiser.generation.fragments import FragmentPlacer
from packages.randomiser.state.distribution import DistributionStore
from packages.randomiser.state.progression import ProgressionGraph, ProgressionState
from packages.randomiser.state.registry import BiomeRegistry
from packages.randomiser.state.rng import Random, seed_to_long


# =============================================================================
# RNG Fixtures
# =============================================================================


@pytest.fixture
def rng_seed_42():
    """RNG initialized with seed 42 for deterministic tests."""
    return Random(42)


@pytest.fixture
def rng_seed_12345():
    """RNG initialized with seed 12345 for deterministic tests."""
    return Random(12345)


@pytest.fixture
def known_seeds():
    """Collection of seed strings and their numeric values."""
    return {
        "ABC": seed_to_long("ABC"),
        "TEST123": seed_to_long("TEST123"),
        "0": seed_to_long("0"),
    }


# =============================================================================
# Biome Fixtures
# =============================================================================


def make_biomes():
    """Eight fragment biomes at increasing depth plus one without fragments."""
    return [
        Biome("Shallows_A", Zone.SAFE_SHALLOWS, 10, 10, fragment_rate=0.4),
        Biome("Shallows_B", Zone.SAFE_SHALLOWS, 10, 10, fragment_rate=0.3),
        Biome("Kelp_A", Zone.KELP, 10, 10, fragment_rate=0.6),
        Biome("Plateau_A", Zone.GRASSY_PLATEAUS, 10, 10, fragment_rate=0.8),
        Biome("Reef_A", Zone.SPARSE_REEF, 10, 10, fragment_rate=1.0),
        Biome("Mushroom_A", Zone.MUSHROOM_FOREST, 10, 10, fragment_rate=0.9),
        Biome("Koosh_A", Zone.KOOSH_ZONE, 10, 10, fragment_rate=0.7),
        Biome("Dunes_A", Zone.DUNES, 10, 10, fragment_rate=1.2),
        Biome("Island_Top", Zone.FLOATING_ISLAND, 0, 4),
    ]


@pytest.fixture
def small_biomes():
    return make_biomes()


@pytest.fixture
def registry(small_biomes):
    """Registry over the small biome table, cap of 5 per biome."""
    return BiomeRegistry(small_biomes, max_per_biome=5)


# =============================================================================
# Placement Fixtures
# =============================================================================


@pytest.fixture
def config():
    """Config matching the documented placement example."""
    return RandomiserConfig(
        seed=42,
        max_biomes_per_fragment=5,
        fragment_spawn_chance_min=0.1,
        fragment_spawn_chance_max=0.3,
    )


@pytest.fixture
def class_ids():
    return {
        Fragment.SEAMOTH: ["seamoth-a"],
        Fragment.CONSTRUCTOR: ["constructor-loose", "constructor-crate"],
        Fragment.CYCLOPS_HULL: ["hull-large", "hull-medium", "hull-small"],
        Fragment.CYCLOPS_BRIDGE: ["bridge-a"],
        Fragment.CYCLOPS_ENGINE: ["engine-a"],
    }


@pytest.fixture
def store():
    return DistributionStore(seed=42)


@pytest.fixture
def progression():
    return ProgressionState()


@pytest.fixture
def graph():
    return ProgressionGraph()


@pytest.fixture
def placer(config, rng_seed_42, registry, graph, store, class_ids):
    """FragmentPlacer wired to the small biome table."""
    return FragmentPlacer(config, rng_seed_42, registry, graph, store, class_ids)


@pytest.fixture
def constructor_item():
    """Two-variant item reachable once depth exceeds 100."""
    return PlaceableItem(Fragment.CONSTRUCTOR, 100, 3)


@pytest.fixture(scope="session")
def static_data():
    """Built-in static data."""
    return load_static_data()
