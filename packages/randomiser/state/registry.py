"""
Biome registry - per-run usage tracking for fragment biomes.

Keeps two pools of fragment-capable biomes:
- full: every biome with a fragment rate. Never shrinks.
- available: biomes still under the per-biome fragment cap and not gated
  behind an item the player does not have yet.

`used` on a biome never exceeds the cap. Placements the engine makes from
the full pool after a biome is capped are counted in `overflow` instead.
"""

import logging
from dataclasses import replace
from typing import Collection, Dict, Iterable, List, Optional

from ..content.biomes import Biome
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class BiomeRegistry:
    """
    Catalogue of biomes with mutable per-run counters.

    Usage:
        registry = BiomeRegistry(VANILLA_BIOMES, max_per_biome=5)
        registry.reset()
        candidates = registry.available_regions(300, excluding=chosen)
        registry.mark_used(candidates[0])
    """

    def __init__(self, biomes: Iterable[Biome], max_per_biome: int):
        # Own copies so usage counters never leak into the static data
        self.biomes: List[Biome] = [replace(b, used=0) for b in biomes]
        self.max_per_biome = max_per_biome
        self._by_name: Dict[str, Biome] = {}
        for biome in self.biomes:
            if biome.name in self._by_name:
                raise ConfigurationError(f"Duplicate biome name: {biome.name}")
            self._by_name[biome.name] = biome

        self._full: List[Biome] = [b for b in self.biomes if b.has_fragments]
        self._available: List[Biome] = []
        self.overflow: Dict[str, int] = {}
        self.reset()

        logger.debug(f"Total biomes suitable for fragments: {len(self._full)}")

    def reset(self):
        """Clear usage and restore the available pool to the full pool."""
        for biome in self.biomes:
            biome.used = 0
        self._available = list(self._full)
        self.overflow = {}

    def get(self, name: str) -> Biome:
        try:
            return self._by_name[name]
        except KeyError:
            raise ConfigurationError(f"Unknown biome: {name}") from None

    def __len__(self) -> int:
        return len(self.biomes)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def available_regions(
        self,
        max_depth: int,
        excluding: Collection[Biome] = (),
        unlocked: Optional[Collection[str]] = None,
    ) -> List[Biome]:
        """
        Biomes under the cap, reachable at max_depth and not in excluding.

        Args:
            max_depth: Deepest accessible depth to consider
            excluding: Biomes already chosen for the current item
            unlocked: Unlocked item keys; biomes whose prerequisite is not
                among them are left out. None skips the prerequisite check.
        """
        excluded = {b.name for b in excluding}
        return [
            b for b in self._available
            if b.accessible_depth <= max_depth
            and b.name not in excluded
            and (b.prerequisite is None or unlocked is None or b.prerequisite in unlocked)
        ]

    def full_regions(self, max_depth: int, excluding: Collection[Biome] = ()) -> List[Biome]:
        """Fallback pool: ignores the cap and prerequisites."""
        excluded = {b.name for b in excluding}
        return [
            b for b in self._full
            if b.accessible_depth <= max_depth and b.name not in excluded
        ]

    def is_available(self, biome: Biome) -> bool:
        return biome in self._available

    def mark_used(self, biome: Biome):
        """
        Record one placement in a biome.

        Evicts the biome from the available pool once the cap is reached.
        """
        if biome.used >= self.max_per_biome:
            self.overflow[biome.name] = self.overflow.get(biome.name, 0) + 1
            logger.warning(f"  Biome {biome.name} is over its cap of {self.max_per_biome}")
            return

        biome.used += 1
        if biome.used >= self.max_per_biome and biome in self._available:
            self._available.remove(biome)
            logger.debug(f"  Biome {biome.name} is full, removed from the pool")

    def usage(self) -> Dict[str, int]:
        """Current usage counters by biome name."""
        return {b.name: b.used for b in self._full}
