"""
Biome definitions.

A Biome is one of the fine-grained spawn regions the game distributes
loot over (BloodKelp_Floor, BloodKelp_CaveWall, ...). Biomes are grouped
into broad Zones; the zone decides how deep the player has to be able to
dive before the biome counts as reachable.

Fragment rates are the combined vanilla fragment spawn rate of a biome.
A biome with fragment_rate None never held fragments and is never
eligible for fragment placement.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class Zone(Enum):
    """Broad world zones, valued by their in-game names."""
    SAFE_SHALLOWS = "SafeShallows"
    KELP = "Kelp"
    GRASSY_PLATEAUS = "GrassyPlateaus"
    CRASH_ZONE = "CrashZone"
    FLOATING_ISLAND = "FloatingIsland"
    SPARSE_REEF = "SparseReef"
    MUSHROOM_FOREST = "MushroomForest"
    UNDERWATER_ISLANDS = "UnderwaterIslands"
    KOOSH_ZONE = "KooshZone"
    JELLYSHROOM_CAVES = "JellyshroomCaves"
    CRAG_FIELD = "CragField"
    MOUNTAINS = "Mountains"
    SEA_TREADER_PATH = "SeaTreaderPath"
    BLOOD_KELP = "BloodKelp"
    GRAND_REEF = "GrandReef"
    DUNES = "Dunes"
    LOST_RIVER = "LostRiver"
    INACTIVE_LAVA_ZONE = "InactiveLavaZone"
    LAVA_LAKES = "LavaLakes"
    # The void outside the map edge
    NONE = "None"

    @property
    def accessible_depth(self) -> int:
        return ZONE_DEPTHS[self]

    @classmethod
    def parse(cls, name: str) -> "Zone":
        """
        Look up a zone by value or member name, ignoring case, spaces and
        underscores ("Grassy Plateaus", "GRASSY_PLATEAUS", "GrassyPlateaus").

        Raises:
            ValueError: if no zone matches
        """
        wanted = name.replace(" ", "").replace("_", "").lower()
        for zone in cls:
            if wanted in (zone.value.lower(), zone.name.replace("_", "").lower()):
                return zone
        raise ValueError(f"Unknown zone: {name!r}")


# Depth (m) the player must be able to reach for a zone's floor to count
# as accessible.
ZONE_DEPTHS: Dict[Zone, int] = {
    Zone.SAFE_SHALLOWS: 25,
    Zone.KELP: 50,
    Zone.GRASSY_PLATEAUS: 80,
    Zone.CRASH_ZONE: 60,
    Zone.FLOATING_ISLAND: 0,
    Zone.SPARSE_REEF: 100,
    Zone.MUSHROOM_FOREST: 150,
    Zone.UNDERWATER_ISLANDS: 150,
    Zone.KOOSH_ZONE: 200,
    Zone.JELLYSHROOM_CAVES: 200,
    Zone.CRAG_FIELD: 200,
    Zone.MOUNTAINS: 250,
    Zone.SEA_TREADER_PATH: 250,
    Zone.BLOOD_KELP: 300,
    Zone.GRAND_REEF: 300,
    Zone.DUNES: 300,
    Zone.LOST_RIVER: 700,
    Zone.INACTIVE_LAVA_ZONE: 1100,
    Zone.LAVA_LAKES: 1400,
    Zone.NONE: 0,
}


@dataclass
class Biome:
    """A single spawn biome with its slot capacities and usage counter."""
    name: str
    zone: Zone
    creature_slots: int
    medium_slots: int
    small_slots: int = -1
    fragment_rate: Optional[float] = None
    # Item that must be unlocked before the biome joins the available pool
    prerequisite: Optional[str] = None
    used: int = 0

    def __post_init__(self):
        if self.small_slots < 0:
            self.small_slots = self.medium_slots

    @property
    def accessible_depth(self) -> int:
        return self.zone.accessible_depth

    @property
    def has_fragments(self) -> bool:
        return self.fragment_rate is not None


def _b(name, zone, creatures, medium, small=-1, rate=None, prerequisite=None) -> Biome:
    return Biome(name, zone, creatures, medium, small, rate, prerequisite)


VANILLA_BIOMES: List[Biome] = [
    _b("SafeShallows_Grass", Zone.SAFE_SHALLOWS, 12, 10, 14, 0.4),
    _b("SafeShallows_SandFlat", Zone.SAFE_SHALLOWS, 10, 8, 12, 0.3),
    _b("SafeShallows_CaveFloor", Zone.SAFE_SHALLOWS, 4, 6),
    _b("Kelp_Sand", Zone.KELP, 14, 10, 12, 0.6),
    _b("Kelp_GrassSparse", Zone.KELP, 10, 8, -1, 0.5),
    _b("Kelp_CaveFloor", Zone.KELP, 4, 5),
    _b("GrassyPlateaus_Grass", Zone.GRASSY_PLATEAUS, 12, 10, 12, 0.8),
    _b("GrassyPlateaus_TechSite", Zone.GRASSY_PLATEAUS, 2, 6, 6, 1.2),
    _b("GrassyPlateaus_CaveFloor", Zone.GRASSY_PLATEAUS, 5, 6, -1, 0.4),
    _b("CrashZone_Sand", Zone.CRASH_ZONE, 6, 12, 14, 1.5),
    _b("CrashZone_Rock", Zone.CRASH_ZONE, 4, 8, -1, 0.9),
    _b("FloatingIsland_Surface", Zone.FLOATING_ISLAND, 0, 4),
    _b("SparseReef_Sand", Zone.SPARSE_REEF, 10, 10, -1, 0.7),
    _b("SparseReef_Techsite", Zone.SPARSE_REEF, 2, 6, 6, 1.1),
    _b("MushroomForest_Grass", Zone.MUSHROOM_FOREST, 12, 12, -1, 0.9),
    _b("MushroomForest_CaveFloor", Zone.MUSHROOM_FOREST, 4, 6, -1, 0.5),
    _b("UnderwaterIslands_IslandTop", Zone.UNDERWATER_ISLANDS, 8, 8, -1, 0.8),
    _b("UnderwaterIslands_ValleyFloor", Zone.UNDERWATER_ISLANDS, 10, 10, -1, 1.0),
    _b("KooshZone_Sand", Zone.KOOSH_ZONE, 8, 10, -1, 0.8),
    _b("KooshZone_CaveFloor", Zone.KOOSH_ZONE, 4, 6, -1, 0.6),
    _b("JellyshroomCaves_CaveSand", Zone.JELLYSHROOM_CAVES, 6, 8, -1, 0.7),
    _b("CragField_Sand", Zone.CRAG_FIELD, 6, 6, -1, 0.5),
    _b("Mountains_Sand", Zone.MOUNTAINS, 10, 10, -1, 0.9),
    _b("Mountains_CaveFloor", Zone.MOUNTAINS, 4, 6, -1, 0.6),
    _b("SeaTreaderPath_Sand", Zone.SEA_TREADER_PATH, 8, 10, -1, 0.7),
    _b("BloodKelp_Floor", Zone.BLOOD_KELP, 10, 10, -1, 0.8),
    _b("BloodKelp_TechSite", Zone.BLOOD_KELP, 2, 6, 6, 1.3),
    _b("GrandReef_Ground", Zone.GRAND_REEF, 10, 10, -1, 0.8),
    _b("GrandReef_CaveFloor", Zone.GRAND_REEF, 4, 6, -1, 0.6),
    _b("Dunes_SandDune", Zone.DUNES, 8, 8, -1, 0.9),
    _b("Dunes_TechSite", Zone.DUNES, 2, 6, 6, 1.2),
    _b("LostRiver_Corridor_Ground", Zone.LOST_RIVER, 6, 8, -1, 0.5, "LaserCutter"),
    _b("LostRiver_BonesField_Ground", Zone.LOST_RIVER, 6, 8, -1, 0.6),
    _b("InactiveLavaZone_Corridor_Floor", Zone.INACTIVE_LAVA_ZONE, 4, 6, -1, 0.4),
    _b("LavaLakes_LavaFloor", Zone.LAVA_LAKES, 4, 6),
]
