"""
Placement records and the per-run distribution store.

SpawnData is the placement record for one fragment: for every variant
class id, the biomes it spawns in with count and probability. The
DistributionStore collects committed SpawnData for a run, plus per-item
discovery count overrides and the chosen start point, and is what gets
handed to persistence once the whole run has succeeded.
"""

import json
import struct
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


def to_float32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class BiomeSpawn:
    """One (biome, count, probability) entry of a variant."""
    biome: str
    count: int = 1
    probability: float = 0.0

    def to_dict(self) -> dict:
        return {"biome": self.biome, "count": self.count, "probability": self.probability}

    @classmethod
    def from_dict(cls, data: dict) -> 'BiomeSpawn':
        return cls(data["biome"], int(data.get("count", 1)), float(data["probability"]))


@dataclass
class SpawnData:
    """Placement record for one fragment across all its variants."""
    item: str
    class_ids: List[str]
    spawns: Dict[str, List[BiomeSpawn]] = field(default_factory=dict)

    def add_spawn(self, class_id: str, spawn: BiomeSpawn):
        """
        Add a biome entry to a variant, merging into its existing list.

        Raises:
            ValueError: if class_id is not a variant of this item, or the
                variant already spawns in that biome
        """
        if class_id not in self.class_ids:
            raise ValueError(f"{class_id} is not a variant of {self.item}")
        entries = self.spawns.setdefault(class_id, [])
        if any(e.biome == spawn.biome for e in entries):
            raise ValueError(f"{class_id} already spawns in {spawn.biome}")
        entries.append(spawn)

    def biomes(self) -> List[str]:
        """Distinct biomes across all variants, in first-use order."""
        seen: List[str] = []
        for class_id in self.class_ids:
            for spawn in self.spawns.get(class_id, []):
                if spawn.biome not in seen:
                    seen.append(spawn.biome)
        return seen

    def probabilities_in(self, biome: str) -> List[float]:
        """Per-variant probabilities for one biome, in variant order."""
        result = []
        for class_id in self.class_ids:
            for spawn in self.spawns.get(class_id, []):
                if spawn.biome == biome:
                    result.append(spawn.probability)
        return result

    def to_dict(self) -> dict:
        return {
            "item": self.item,
            "class_ids": list(self.class_ids),
            "spawns": {
                cid: [s.to_dict() for s in self.spawns.get(cid, [])]
                for cid in self.class_ids
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SpawnData':
        spawn_data = cls(data["item"], list(data["class_ids"]))
        for cid, entries in data.get("spawns", {}).items():
            for entry in entries:
                spawn_data.add_spawn(cid, BiomeSpawn.from_dict(entry))
        return spawn_data


class DistributionStore:
    """
    In-memory result of one randomiser run.

    Records are immutable once committed; committing the same item twice
    is an error.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self.spawn_data: Dict[str, SpawnData] = {}
        self.discovery_overrides: Dict[str, int] = {}
        self.start_point: Optional[Tuple[int, int, int]] = None

    def commit(self, spawn_data: SpawnData):
        if spawn_data.item in self.spawn_data:
            raise ValueError(f"{spawn_data.item} already has committed spawn data")
        self.spawn_data[spawn_data.item] = spawn_data

    def set_discovery_count(self, item: str, count: int):
        self.discovery_overrides[item] = count

    def get(self, item: str) -> Optional[SpawnData]:
        return self.spawn_data.get(item)

    def __contains__(self, item: str) -> bool:
        return item in self.spawn_data

    def __len__(self) -> int:
        return len(self.spawn_data)

    def to_dict(self) -> dict:
        """Serialize to dictionary (for saving)."""
        return {
            "seed": self.seed,
            "spawn_data": {k: v.to_dict() for k, v in self.spawn_data.items()},
            "discovery_overrides": dict(self.discovery_overrides),
            "start_point": list(self.start_point) if self.start_point is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'DistributionStore':
        store = cls(seed=data.get("seed", 0))
        for spawn in data.get("spawn_data", {}).values():
            store.commit(SpawnData.from_dict(spawn))
        store.discovery_overrides = {
            k: int(v) for k, v in data.get("discovery_overrides", {}).items()
        }
        start = data.get("start_point")
        store.start_point = tuple(start) if start is not None else None
        return store

    def to_json(self) -> str:
        """Canonical JSON; identical runs give identical strings."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
