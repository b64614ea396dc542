"""
Randomiser run driver.

One run:
1. Resolve static data (awaiting the loader if it is still running).
2. Seed a fresh Random, reset the biome registry, progression graph and
   an empty progression state.
3. Place fragments in a progression loop: place everything reachable at
   the current depth, let unlocks raise the depth, otherwise search
   deeper by depth_search_step.
4. Choose the alternate start.
5. Only then hand the finished DistributionStore to persistence.

Nothing is persisted if any step raises.

Runs must not overlap; RunTrigger debounces repeated requests but does
not lock.
"""

import logging
import time
from concurrent.futures import Future
from enum import Enum
from typing import Optional, Union

from .config import RandomiserConfig
from .data import StaticData
from .errors import InfeasibleConstraintError, RandomiserError
from .generation.fragments import FragmentPlacer
from .generation.starts import StartSelector
from .state.distribution import DistributionStore
from .state.progression import ProgressionGraph, ProgressionState
from .state.registry import BiomeRegistry
from .state.rng import Random, new_seed

logger = logging.getLogger(__name__)

# Deepest depth the progression loop searches before giving up
MAX_SEARCH_DEPTH = 2000


class SeedPolicy(Enum):
    """How a run request picks its seed."""
    NEW_SEED = "new"
    SAME_SEED = "same"


class Randomiser:
    """
    Runs the fragment and start randomisation.

    Usage:
        randomiser = Randomiser(config, load_static_data(), persistence=SaveFile(path))
        store = randomiser.randomise()
    """

    def __init__(
        self,
        config: RandomiserConfig,
        static_data: Union[StaticData, Future],
        persistence=None,
        graph: Optional[ProgressionGraph] = None,
    ):
        self.config = config
        self.persistence = persistence
        self.graph = graph or ProgressionGraph()
        self._static_data = static_data
        self._registry: Optional[BiomeRegistry] = None

    @property
    def static_data(self) -> StaticData:
        """Static data, waiting for the loader on first access."""
        if isinstance(self._static_data, Future):
            self._static_data = self._static_data.result()
        return self._static_data

    @property
    def registry(self) -> BiomeRegistry:
        if self._registry is None:
            self._registry = BiomeRegistry(self.static_data.biomes, self.config.max_fragments_per_biome)
        return self._registry

    def randomise(self, seed: Optional[int] = None) -> DistributionStore:
        """
        Run a full randomisation and persist it.

        Args:
            seed: Seed for this run; defaults to config.seed

        Returns:
            The finished DistributionStore

        Raises:
            RandomiserError: on any fatal configuration or placement error;
                nothing is persisted in that case
        """
        seed = self.config.seed if seed is None else seed
        logger.info(f"Randomising with seed {seed}")

        try:
            store = self._run(seed)
        except RandomiserError as e:
            logger.error(f"Randomisation failed, nothing was saved: {e}")
            raise

        if self.persistence is not None:
            self.persistence.save(store)
        logger.info(f"Finished randomising {len(store)} fragments")
        return store

    def _run(self, seed: int) -> DistributionStore:
        static_data = self.static_data
        rng = Random(seed)
        registry = self.registry
        registry.max_per_biome = self.config.max_fragments_per_biome
        registry.reset()
        self.graph.reset()
        progression = ProgressionState()
        store = DistributionStore(seed=seed)

        if self.config.randomise_fragments:
            placer = FragmentPlacer(self.config, rng, registry, self.graph, store, static_data.class_ids)
            self._place_fragments(placer, progression)

        selector = StartSelector(static_data.alternate_starts, rng)
        start = selector.select_start(self.config.spawn_point)
        store.start_point = tuple(start) if start is not None else None

        return store

    def _place_fragments(self, placer: FragmentPlacer, progression: ProgressionState):
        """
        Progression loop over all fragments.

        Raises:
            InfeasibleConstraintError: if fragments remain unplaced past
                MAX_SEARCH_DEPTH
        """
        pending = sorted(self.static_data.items.values(), key=lambda item: item.key.value)
        depth = self.graph.reachable_depth(progression, self.config.max_depth_without_vehicle)

        while pending:
            placed_any = False

            for item in list(pending):
                if placer.place_item(item, progression, depth) is None:
                    continue
                pending.remove(item)
                placed_any = True
                depth = self.graph.reachable_depth(progression, depth)

            if placed_any:
                continue

            depth += self.config.depth_search_step
            if depth > MAX_SEARCH_DEPTH:
                raise InfeasibleConstraintError(
                    f"Could not place {[i.key.value for i in pending]} "
                    f"within {MAX_SEARCH_DEPTH}m"
                )
            logger.debug(f"Nothing placeable, searching deeper: {depth}m")


class RunTrigger:
    """
    Entry point for the "randomise" buttons.

    Ignores a request that arrives within MIN_INTERVAL seconds of the
    previous one.
    """

    MIN_INTERVAL = 0.5

    def __init__(self, randomiser: Randomiser):
        self.randomiser = randomiser
        self._last_request: Optional[float] = None

    def is_request_allowed(self, now: float) -> bool:
        if self._last_request is not None and now - self._last_request < self.MIN_INTERVAL:
            return False
        self._last_request = now
        return True

    def request_run(self, policy: SeedPolicy, now: Optional[float] = None) -> Optional[DistributionStore]:
        """
        Randomise with a new or the configured seed.

        Returns:
            The finished store, or None if the request was debounced
        """
        now = time.monotonic() if now is None else now
        if not self.is_request_allowed(now):
            logger.debug("Ignoring repeated randomise request")
            return None

        config = self.randomiser.config
        if policy == SeedPolicy.NEW_SEED:
            config.seed = new_seed()
            logger.info(f"Changed seed to {config.seed}")

        return self.randomiser.randomise(config.seed)
