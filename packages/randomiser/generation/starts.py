"""
Alternate start selection.

Picks the lifepod spawn point for a run from the configured start mode:
- "Vanilla..."      no override (also "unchanged")
- "Random"          any start zone the player can reach the floor of
                    (depth <= 100), never the void (also
                    "random-reachable")
- "Chaotic Random"  any start zone, the void included (also
                    "fully-random")
- zone name/alias   that zone

The point is a uniformly chosen box of the zone, then uniform integer
x/z inside that box, at sea level.
"""

import logging
from typing import Dict, List, Mapping, NamedTuple, Optional

from ..content.biomes import Zone
from ..content.starts import (
    SpawnBox, START_ALIASES, MODE_ALIASES, START_HEIGHT, REACHABLE_START_DEPTH,
    VANILLA_MODE_PREFIX, RANDOM_MODE, CHAOTIC_MODE,
)
from ..errors import ConfigurationError
from ..state.rng import Random

logger = logging.getLogger(__name__)


class StartPoint(NamedTuple):
    x: int
    y: int
    z: int


class StartSelector:
    """Chooses one start point from a zone -> spawn boxes table."""

    def __init__(
        self,
        alternate_starts: Mapping[Zone, List[SpawnBox]],
        rng: Random,
        reachable_depth: int = REACHABLE_START_DEPTH,
    ):
        self.alternate_starts: Dict[Zone, List[SpawnBox]] = dict(alternate_starts)
        self.rng = rng
        self.reachable_depth = reachable_depth

    def candidate_zones(self, mode: str) -> List[Zone]:
        """
        Zones a mode may pick from, in table order.

        Raises:
            ConfigurationError: if the mode is neither a known mode nor a zone
        """
        mode = MODE_ALIASES.get(mode, mode)
        if mode == RANDOM_MODE:
            return [
                zone for zone in self.alternate_starts
                if zone != Zone.NONE and zone.accessible_depth <= self.reachable_depth
            ]
        if mode == CHAOTIC_MODE:
            return list(self.alternate_starts)

        zone = START_ALIASES.get(mode)
        if zone is None:
            try:
                zone = Zone.parse(mode)
            except ValueError:
                raise ConfigurationError(f"Starting biome '{mode}' is invalid!") from None
        return [zone]

    def select_start(self, mode: str) -> Optional[StartPoint]:
        """
        Find a spawn point for the lifepod.

        Returns:
            The new start point, or None to keep the vanilla start

        Raises:
            ConfigurationError: if the mode is unknown or its zone has no
                recorded spawn boxes
        """
        if MODE_ALIASES.get(mode, mode).startswith(VANILLA_MODE_PREFIX):
            return None

        zones = self.candidate_zones(mode)
        if not zones:
            raise ConfigurationError(f"No start zones available for mode '{mode}'")
        zone = self.rng.choice(zones)

        boxes = self.alternate_starts.get(zone)
        if not boxes:
            logger.error(f"No information found on chosen starting zone {zone.value}")
            raise ConfigurationError(f"Starting biome '{mode}' is invalid!")

        box = self.rng.choice(boxes)
        x = self.rng.random_int_range(box.x_min, box.x_max)
        z = self.rng.random_int_range(box.z_min, box.z_max)

        logger.debug(f"Chosen new lifepod spawnpoint in {zone.value} at x:{x} y:{START_HEIGHT} z:{z}")
        return StartPoint(x, START_HEIGHT, z)
