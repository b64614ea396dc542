"""
Randomiser configuration.

RandomiserConfig holds every option a run reads. `sanitise()` walks the
FIELD_TYPES and CONFIG_BOUNDS tables key by key and resets anything of the
wrong type or out of range to its default. The placement code trusts the
values it is given and does not re-check them.

Config files are plain JSON objects keyed by field name:

    {"seed": 1234, "max_biomes_per_fragment": 6, "spawn_point": "Random"}
"""

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Dict, List, Tuple, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# field -> (type, min, max, default). int fields reject floats; float
# fields take ints too.
CONFIG_BOUNDS: Dict[str, Tuple[type, float, float, float]] = {
    "max_biomes_per_fragment": (int, 3, 10, 5),
    "min_fragments_to_unlock": (int, 1, 20, 1),
    "max_fragments_to_unlock": (int, 1, 20, 5),
    "max_fragments_per_biome": (int, 1, 20, 5),
    "fragment_spawn_chance_min": (float, 0.0, 10.0, 0.3),
    "fragment_spawn_chance_max": (float, 0.0, 10.0, 0.6),
    "max_depth_without_vehicle": (int, 0, 2000, 100),
    "depth_search_step": (int, 1, 500, 50),
}

# Non-numeric fields -> expected type
FIELD_TYPES: Dict[str, type] = {
    "seed": int,
    "spawn_point": str,
    "randomise_fragments": bool,
    "randomise_num_fragments": bool,
    "randomise_recipes": bool,
}

# (min field, max field) pairs that must stay ordered
ORDERED_PAIRS: List[Tuple[str, str]] = [
    ("min_fragments_to_unlock", "max_fragments_to_unlock"),
    ("fragment_spawn_chance_min", "fragment_spawn_chance_max"),
]

# Fixed lower bound on how many biomes one fragment spreads over
MIN_BIOMES_PER_FRAGMENT = 3


def _default(key: str):
    return CONFIG_BOUNDS[key][3]


def _has_type(value, expected: type) -> bool:
    """isinstance, except bools never count as numbers."""
    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


@dataclass
class RandomiserConfig:
    """All options for a randomiser run."""
    seed: int = 0
    spawn_point: str = "Vanilla"

    randomise_fragments: bool = True
    randomise_num_fragments: bool = False
    randomise_recipes: bool = False

    max_biomes_per_fragment: int = _default("max_biomes_per_fragment")
    min_fragments_to_unlock: int = _default("min_fragments_to_unlock")
    max_fragments_to_unlock: int = _default("max_fragments_to_unlock")
    max_fragments_per_biome: int = _default("max_fragments_per_biome")
    fragment_spawn_chance_min: float = _default("fragment_spawn_chance_min")
    fragment_spawn_chance_max: float = _default("fragment_spawn_chance_max")
    max_depth_without_vehicle: int = _default("max_depth_without_vehicle")
    depth_search_step: int = _default("depth_search_step")

    def sanitise(self) -> List[str]:
        """
        Reset values of the wrong type, out-of-range numeric values and
        misordered min/max pairs to their defaults.

        Returns:
            Names of the fields that were reset
        """
        reset = []
        defaults = {f.name: f.default for f in fields(self)}

        for key, expected in FIELD_TYPES.items():
            value = getattr(self, key)
            if not _has_type(value, expected):
                logger.warning(f"Resetting config value for {key}, expected {expected.__name__}: {value!r}")
                setattr(self, key, defaults[key])
                reset.append(key)

        for key, (expected, low, high, default) in CONFIG_BOUNDS.items():
            value = getattr(self, key)
            if not _has_type(value, expected):
                logger.warning(f"Resetting config value for {key}, expected {expected.__name__}: {value!r}")
                setattr(self, key, default)
                reset.append(key)
            elif value < low or value > high:
                logger.warning(f"Resetting invalid config value for {key}: {value}")
                setattr(self, key, default)
                reset.append(key)

        for low_key, high_key in ORDERED_PAIRS:
            if getattr(self, low_key) > getattr(self, high_key):
                logger.warning(f"Resetting {low_key}/{high_key}: min is above max")
                setattr(self, low_key, _default(low_key))
                setattr(self, high_key, _default(high_key))
                reset.extend([low_key, high_key])

        if reset:
            logger.info(f"Config sanitised, {len(reset)} value(s) reset")
        return reset

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'RandomiserConfig':
        """Build a config from a dict; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config must be a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'RandomiserConfig':
        """
        Load and sanitise a config file. A missing file gives the defaults.

        Raises:
            ConfigurationError: if the file is not valid JSON
        """
        path = Path(path)
        if not path.exists():
            logger.info(f"Config not found at {path}, using defaults.")
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Malformed config file {path}: {e}") from e

        config = cls.from_dict(data)
        config.sanitise()
        return config

    def save(self, path: Union[str, Path]):
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
