"""
Fragment placement.

Spreads each fragment over a random set of biomes reachable at the
current progression depth and gives every variant a spawn probability in
each of those biomes.

Placement of one fragment (FragmentPlacer.place_item):
1. Skip if the fragment is not reachable yet (accessible_depth >= depth).
2. Optionally roll the number of scans needed to unlock it.
3. Roll biome_count in [3, max_biomes_per_fragment].
4. biome_count times:
   a. Pick a biome from the available pool (under cap, not yet used for
      this fragment). Fall back to the full pool if that is empty. Stop
      early once every biome at this depth holds the fragment; only a
      depth with no fragment biome at all is fatal.
   b. Budget = spawn percentage * biome fragment rate, where the
      percentage is min + U(0,1) * (max - min), plus a bonus when more
      scans than usual are needed.
   c. Split the budget over the variants with normalised random weights.
5. Propagate unlocks if recipes are not randomised.
6. Commit the SpawnData to the distribution store.
"""

import logging
from typing import List, Mapping, Optional

from ..config import RandomiserConfig, MIN_BIOMES_PER_FRAGMENT
from ..content.biomes import Biome
from ..content.fragments import Fragment, PlaceableItem
from ..errors import ConfigurationError, InfeasibleConstraintError
from ..state.distribution import BiomeSpawn, DistributionStore, SpawnData, to_float32
from ..state.progression import ProgressionGraph, ProgressionState
from ..state.registry import BiomeRegistry
from ..state.rng import Random

logger = logging.getLogger(__name__)

# Scans needed before the spawn bonus kicks in
DEFAULT_DISCOVERIES = 5
# Spawn percentage added per scan above DEFAULT_DISCOVERIES
DISCOVERY_BONUS = 0.02


def split_probability(rng: Random, budget: float, count: int) -> List[float]:
    """
    Split a probability budget over `count` variants.

    Draws one uniform weight per variant and scales the weights so they
    sum to the budget. A single variant takes the whole budget without
    consuming a draw.
    """
    if count < 1:
        raise ValueError("need at least one variant to split over")
    if count == 1:
        return [budget]

    raw = [rng.random_double() for _ in range(count)]
    total = sum(raw)
    if total <= 0.0:
        return [budget / count] * count

    scale = budget / total
    return [r * scale for r in raw]


class FragmentPlacer:
    """
    Places fragments for one run.

    Usage:
        placer = FragmentPlacer(config, rng, registry, graph, store, class_ids)
        spawn_data = placer.place_item(item, progression, reachable_depth=300)
    """

    def __init__(
        self,
        config: RandomiserConfig,
        rng: Random,
        registry: BiomeRegistry,
        graph: ProgressionGraph,
        store: DistributionStore,
        class_ids: Mapping[Fragment, List[str]],
    ):
        self.config = config
        self.rng = rng
        self.registry = registry
        self.graph = graph
        self.store = store
        self.class_ids = class_ids

    # ========================================================================
    # PLACEMENT
    # ========================================================================

    def place_item(
        self,
        item: PlaceableItem,
        progression: ProgressionState,
        reachable_depth: int,
    ) -> Optional[SpawnData]:
        """
        Randomise the spawn points of one fragment.

        Args:
            item: The fragment to place
            progression: Unlocks so far this run; updated in place
            reachable_depth: Deepest depth the player can access right now

        Returns:
            The committed SpawnData, or None if the fragment is not
            reachable at this depth yet

        Raises:
            ConfigurationError: if the fragment has no known variants
            InfeasibleConstraintError: if no biome exists at this depth
        """
        class_ids = self.class_ids.get(item.key)
        if not class_ids:
            raise ConfigurationError(f"Failed to find fragment '{item.key.value}' in class id database!")

        if item.accessible_depth >= reachable_depth:
            logger.debug(f"Skipping {item.key.value}: needs depth {item.accessible_depth}, have {reachable_depth}")
            return None

        logger.debug(f"Randomising fragment {item.key.value} for depth {reachable_depth}")

        needed = self._discoveries_needed(item)
        spawn_data = SpawnData(item.key.value, list(class_ids))

        biome_count = self.rng.random_int_range(MIN_BIOMES_PER_FRAGMENT, self.config.max_biomes_per_fragment)
        chosen: List[Biome] = []

        for _ in range(biome_count):
            biome = self._choose_biome(reachable_depth, chosen, progression)
            if biome is None:
                logger.warning(
                    f"  Only {len(chosen)} distinct biomes at depth {reachable_depth}, "
                    f"placing {item.key.value} in fewer than {biome_count}"
                )
                break
            chosen.append(biome)
            self.registry.mark_used(biome)

            budget = self.calc_spawn_rate(biome, needed)
            split = split_probability(self.rng, budget, len(class_ids))
            for class_id, probability in zip(class_ids, split):
                spawn = BiomeSpawn(biome.name, 1, to_float32(probability))
                spawn_data.add_spawn(class_id, spawn)
                logger.debug(f"  Adding {class_id} to biome: {biome.name}, {spawn.probability}")

        progression.unlock(item.key.value)
        if not self.config.randomise_recipes:
            self.graph.propagate(item.key.value, progression)

        self.store.commit(spawn_data)
        return spawn_data

    def _choose_biome(
        self,
        reachable_depth: int,
        chosen: List[Biome],
        progression: ProgressionState,
    ) -> Optional[Biome]:
        """
        Pick a biome for the current fragment, ignoring the cap if needed.

        Returns:
            The biome, or None once every biome at this depth is already
            used by the fragment

        Raises:
            InfeasibleConstraintError: if no fragment biome exists at this depth
        """
        candidates = self.registry.available_regions(reachable_depth, excluding=chosen, unlocked=progression)
        if candidates:
            return self.rng.choice(candidates)

        if not self.registry.full_regions(reachable_depth):
            raise InfeasibleConstraintError(f"No fragment biome at all at depth {reachable_depth}")

        candidates = self.registry.full_regions(reachable_depth, excluding=chosen)
        if not candidates:
            return None
        logger.warning(f"  No available biome at depth {reachable_depth}, using the full pool")
        return self.rng.choice(candidates)

    # ========================================================================
    # SPAWN RATES
    # ========================================================================

    def calc_spawn_rate(self, biome: Biome, discoveries: Optional[int] = None) -> float:
        """
        Total spawn probability budget of a fragment in one biome.

        A percentage between the configured min and max of the biome's
        combined vanilla fragment rate, raised when the fragment needs
        more scans than DEFAULT_DISCOVERIES.
        """
        low = self.config.fragment_spawn_chance_min
        high = self.config.fragment_spawn_chance_max
        percentage = low + self.rng.random_double() * (high - low)

        if discoveries is not None and discoveries > DEFAULT_DISCOVERIES:
            percentage += (discoveries - DEFAULT_DISCOVERIES) * DISCOVERY_BONUS

        return percentage * (biome.fragment_rate or 0.0)

    # ========================================================================
    # SCANS TO UNLOCK
    # ========================================================================

    def randomise_discovery_count(self, item: PlaceableItem) -> int:
        """Roll and record the number of scans needed to unlock a fragment."""
        count = self.rng.random_int_range(
            self.config.min_fragments_to_unlock,
            self.config.max_fragments_to_unlock,
        )
        self.store.set_discovery_count(item.key.value, count)
        logger.debug(f"  {item.key.value} now needs {count} scans")
        return count

    def _discoveries_needed(self, item: PlaceableItem) -> Optional[int]:
        if self.config.randomise_num_fragments and item.discoveries is not None:
            return self.randomise_discovery_count(item)
        return item.discoveries
