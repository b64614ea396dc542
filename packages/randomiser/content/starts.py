"""
Alternate lifepod starts.

Each zone lists one or more axis-aligned spawn boxes on the horizontal
plane. Boxes are written the way the start data file stores them:
(x_min, z_max, x_max, z_min).
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from .biomes import Zone


@dataclass(frozen=True)
class SpawnBox:
    """Horizontal spawn rectangle, bounds inclusive."""
    x_min: int
    x_max: int
    z_min: int
    z_max: int

    @classmethod
    def from_corners(cls, values: Sequence[float]) -> "SpawnBox":
        """Build from (x_min, z_max, x_max, z_min) as stored in start data."""
        if len(values) != 4:
            raise ValueError(f"spawn box needs 4 values, got {len(values)}")
        x_min, z_max, x_max, z_min = (int(v) for v in values)
        if x_min > x_max or z_min > z_max:
            raise ValueError(f"inverted spawn box: {list(values)}")
        return cls(x_min, x_max, z_min, z_max)

    def contains(self, x: int, z: int) -> bool:
        return self.x_min <= x <= self.x_max and self.z_min <= z <= self.z_max


# Vertical coordinate of every start (sea level)
START_HEIGHT = 0

# Deepest zone the "Random" mode may pick, so the seafloor is reachable
# without equipment.
REACHABLE_START_DEPTH = 100

VANILLA_MODE_PREFIX = "Vanilla"
RANDOM_MODE = "Random"
CHAOTIC_MODE = "Chaotic Random"

# Alternative spellings of the start modes
MODE_ALIASES: Dict[str, str] = {
    "unchanged": VANILLA_MODE_PREFIX,
    "random-reachable": RANDOM_MODE,
    "fully-random": CHAOTIC_MODE,
}

# Config spellings that don't match a zone name directly
START_ALIASES: Dict[str, Zone] = {
    "BulbZone": Zone.KOOSH_ZONE,
    "Floating Island": Zone.FLOATING_ISLAND,
    "Void": Zone.NONE,
}


def _boxes(*corners) -> List[SpawnBox]:
    return [SpawnBox.from_corners(c) for c in corners]


ALTERNATE_STARTS: Dict[Zone, List[SpawnBox]] = {
    Zone.KELP: _boxes((-350, 100, -200, -50), (150, 350, 300, 200)),
    Zone.GRASSY_PLATEAUS: _boxes((-700, 50, -450, -300), (250, -350, 500, -550)),
    Zone.CRASH_ZONE: _boxes((600, -700, 900, -1000)),
    Zone.FLOATING_ISLAND: _boxes((-780, -560, -720, -620)),
    Zone.SPARSE_REEF: _boxes((-850, -500, -650, -850)),
    Zone.MUSHROOM_FOREST: _boxes((-1050, 600, -800, 350)),
    Zone.UNDERWATER_ISLANDS: _boxes((-250, 1100, 0, 900)),
    Zone.KOOSH_ZONE: _boxes((1150, 950, 1350, 700)),
    Zone.CRAG_FIELD: _boxes((-50, -1200, 200, -1400)),
    Zone.MOUNTAINS: _boxes((800, 1300, 1100, 1000)),
    Zone.SEA_TREADER_PATH: _boxes((-1400, -300, -1200, -600)),
    Zone.BLOOD_KELP: _boxes((-1200, 1200, -1000, 1000)),
    Zone.GRAND_REEF: _boxes((-600, -1300, -300, -1600)),
    Zone.DUNES: _boxes((-1500, 650, -1200, 300)),
    Zone.NONE: _boxes((-2500, 2500, -2300, 2300), (2300, -2300, 2500, -2500)),
}
