"""
Fragment definitions.

Fragments are the scannable blueprint pieces the randomiser spreads over
biomes. One fragment type can have several prefabs (e.g. a loose
constructor fragment and one sitting in a crate); those are its
variants and share one placement budget.

Tables:
- FRAGMENT_DATA_PATHS: prefab file name -> Fragment. Acts as the filter
  for which prefabs in the prefab database are fragments at all.
- DEFAULT_PREFAB_FILES: class id -> prefab path, the built-in stand-in
  for the game's prefab database.
- FRAGMENT_ITEMS: per-fragment accessibility depth and vanilla number of
  scans needed.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional


class Fragment(Enum):
    """Fragment item keys, valued by their TechType names."""
    BASE_BIOREACTOR = "BaseBioReactorFragment"
    BASE_NUCLEAR_REACTOR = "BaseNuclearReactorFragment"
    BATTERY_CHARGER = "BatteryChargerFragment"
    BEACON = "BeaconFragment"
    CONSTRUCTOR = "ConstructorFragment"
    CYCLOPS_BRIDGE = "CyclopsBridgeFragment"
    CYCLOPS_ENGINE = "CyclopsEngineFragment"
    CYCLOPS_HULL = "CyclopsHullFragment"
    EXOSUIT = "ExosuitFragment"
    EXOSUIT_DRILL_ARM = "ExosuitDrillArmFragment"
    EXOSUIT_GRAPPLING_ARM = "ExosuitGrapplingArmFragment"
    EXOSUIT_PROPULSION_ARM = "ExosuitPropulsionArmFragment"
    EXOSUIT_TORPEDO_ARM = "ExosuitTorpedoArmFragment"
    GRAV_SPHERE = "GravSphereFragment"
    LASER_CUTTER = "LaserCutterFragment"
    LED_LIGHT = "LEDLightFragment"
    MOONPOOL = "MoonpoolFragment"
    POWER_CELL_CHARGER = "PowerCellChargerFragment"
    POWER_TRANSMITTER = "PowerTransmitterFragment"
    PROPULSION_CANNON = "PropulsionCannonFragment"
    SCANNER_ROOM = "BaseMapRoomFragment"
    SEAGLIDE = "SeaglideFragment"
    SEAMOTH = "SeamothFragment"
    STASIS_RIFLE = "StasisRifleFragment"
    THERMAL_PLANT = "ThermalPlantFragment"
    WORKBENCH = "WorkbenchFragment"

    @classmethod
    def parse(cls, key: str) -> "Fragment":
        """Look up a fragment by TechType name or member name."""
        for fragment in cls:
            if key in (fragment.value, fragment.name):
                return fragment
        raise ValueError(f"Unknown fragment: {key!r}")


@dataclass(frozen=True)
class PlaceableItem:
    """A fragment as the placement engine sees it."""
    key: Fragment
    # Reachable depth must exceed this before the item is placed
    accessible_depth: int
    # Vanilla number of scans to unlock, None if not scannable for unlock
    discoveries: Optional[int] = None


FRAGMENT_DATA_PATHS: Dict[str, Fragment] = {
    "BaseBioReactor_Fragment": Fragment.BASE_BIOREACTOR,
    "BaseNuclearReactor_Fragment": Fragment.BASE_NUCLEAR_REACTOR,
    "BatteryCharger_Fragment": Fragment.BATTERY_CHARGER,
    "Beacon_Fragment": Fragment.BEACON,
    "Constructor_Fragment": Fragment.CONSTRUCTOR,
    "Constructor_Fragment_InCrate": Fragment.CONSTRUCTOR,
    "CyclopsBridge_Fragment": Fragment.CYCLOPS_BRIDGE,
    "CyclopsEngine_Fragment": Fragment.CYCLOPS_ENGINE,
    "CyclopsHull_Fragment_Large": Fragment.CYCLOPS_HULL,
    "CyclopsHull_Fragment_Medium": Fragment.CYCLOPS_HULL,
    "Exosuit_Fragment": Fragment.EXOSUIT,
    "ExosuitDrillArmfragment": Fragment.EXOSUIT_DRILL_ARM,
    "ExosuitGrapplingArmfragment": Fragment.EXOSUIT_GRAPPLING_ARM,
    "ExosuitPropulsionArmfragment": Fragment.EXOSUIT_PROPULSION_ARM,
    "ExosuitTorpedoArmfragment": Fragment.EXOSUIT_TORPEDO_ARM,
    "GravSphere_Fragment": Fragment.GRAV_SPHERE,
    "LaserCutterFragment": Fragment.LASER_CUTTER,
    "LaserCutterFragment_InCrate": Fragment.LASER_CUTTER,
    "ledlightfragment": Fragment.LED_LIGHT,
    "moonpoolfragment": Fragment.MOONPOOL,
    "PowerCellCharger_Fragment": Fragment.POWER_CELL_CHARGER,
    "powertransmitterfragment": Fragment.POWER_TRANSMITTER,
    "PropulsionCannonJunkFragment": Fragment.PROPULSION_CANNON,
    "scannerroomfragment": Fragment.SCANNER_ROOM,
    "SeaglideJunkFragment": Fragment.SEAGLIDE,
    "Seamoth_Fragment": Fragment.SEAMOTH,
    "StasisRifleJunkFragment": Fragment.STASIS_RIFLE,
    "ThermalPlant_Fragment": Fragment.THERMAL_PLANT,
    "Workbench_Fragment": Fragment.WORKBENCH,
}


DEFAULT_PREFAB_FILES: Dict[str, str] = {
    "f8c4b1a2-6d0e-4b79-9c3a-1e5d7a2b0c41": "WorldEntities/Fragments/BaseBioReactor_Fragment.prefab",
    "0e394d55-da8c-4b3e-b038-979477ce77c1": "WorldEntities/Fragments/BaseNuclearReactor_Fragment.prefab",
    "33b7d3e2-6f1c-4d8a-8a52-5c4a9e0f7d13": "WorldEntities/Fragments/BatteryCharger_Fragment.prefab",
    "8f2b5e1d-0c6a-47f3-b5e9-2d4c8a1f6e07": "WorldEntities/Fragments/Beacon_Fragment.prefab",
    "62a5c3d1-9e8f-4b02-a7c6-3f1e5d9b2a48": "WorldEntities/Fragments/Constructor_Fragment.prefab",
    "e7d1a9b3-4c5f-4e6a-8d2b-7a0c3f9e1b56": "WorldEntities/Fragments/Constructor_Fragment_InCrate.prefab",
    "a1c6e8f2-3b7d-4950-9e4a-6c2d8b0f5a39": "WorldEntities/Fragments/CyclopsBridge_Fragment.prefab",
    "5d9f2b7e-1a4c-4f8d-b6e3-0c7a9d2f4e15": "WorldEntities/Fragments/CyclopsEngine_Fragment.prefab",
    "c3e8a5d1-7f2b-4a96-8c0e-4d1b6f9a3e72": "WorldEntities/Fragments/CyclopsHull_Fragment_Large.prefab",
    "9b4d7f1a-2e6c-4d3b-a8f5-1e9c3a7d5b20": "WorldEntities/Fragments/CyclopsHull_Fragment_Medium.prefab",
    "4a8e2c6f-9d1b-4e57-b3a0-8f6d2c4e9a11": "WorldEntities/Fragments/Exosuit_Fragment.prefab",
    "d2f6b9e4-5a3c-4871-9d0f-3b8e1a6c7d94": "WorldEntities/Fragments/ExosuitDrillArmfragment.prefab",
    "7e1c4a8d-6b2f-4d9e-a5c3-9f0b7e2d1a68": "WorldEntities/Fragments/ExosuitGrapplingArmfragment.prefab",
    "b5a9d3f7-0e4c-4b61-8f2d-6a1c9e5b3d07": "WorldEntities/Fragments/ExosuitPropulsionArmfragment.prefab",
    "2c7f5e9b-8d1a-4c3f-b0e6-5d4a2f8c6e93": "WorldEntities/Fragments/ExosuitTorpedoArmfragment.prefab",
    "6f3b8d2a-4c9e-4a05-9b7d-2e6f1c3a8d54": "WorldEntities/Fragments/GravSphere_Fragment.prefab",
    "e0d4a7c2-9f5b-4e18-a3d6-7b2c5f0e9a86": "WorldEntities/Fragments/LaserCutterFragment.prefab",
    "1b8f6c3e-5d2a-4f97-8e4b-0a9d6c1f7e32": "WorldEntities/Fragments/LaserCutterFragment_InCrate.prefab",
    "8d5c1f9a-3e7b-4d26-b9a4-4f0e8c2d6b15": "WorldEntities/Fragments/ledlightfragment.prefab",
    "3e9a6d0c-2f8b-4c74-a1e5-8b3d7f9c0a61": "WorldEntities/Fragments/moonpoolfragment.prefab",
    "a6d2e8b4-1c9f-4a30-9e7b-5c8f1d4a2e09": "WorldEntities/Fragments/PowerCellCharger_Fragment.prefab",
    "5f0c9b7d-8a3e-4e42-b6d1-1d7a4e8f3c26": "WorldEntities/Fragments/powertransmitterfragment.prefab",
    "c9b3f1e6-7d4a-4b58-8a2c-3e5d0b9f6a74": "WorldEntities/Fragments/PropulsionCannonJunkFragment.prefab",
    "0a7e4c2d-6b9f-4d13-a8e5-9c1f3b7d5e40": "WorldEntities/Fragments/scannerroomfragment.prefab",
    "d8e1b5a3-2c6f-4f89-9d0a-7e4b2c8f1d53": "WorldEntities/Fragments/SeaglideJunkFragment.prefab",
    "4c2a9e7f-1d5b-4a64-b8c3-0f6e9a2d4b18": "WorldEntities/Fragments/Seamoth_Fragment.prefab",
    "7b6d3f8e-9a2c-4e05-a4f1-2d8c5b0e7a39": "WorldEntities/Fragments/StasisRifleJunkFragment.prefab",
    "f1a5c8d4-0e7b-4c92-9f3e-6b1d4a7c2e85": "WorldEntities/Fragments/ThermalPlant_Fragment.prefab",
    "2e8b4d6a-5f1c-4b37-8e9d-4a0c7f3b1d62": "WorldEntities/Fragments/Workbench_Fragment.prefab",
    # Not a fragment, filtered out by FRAGMENT_DATA_PATHS
    "9f16a5c7-4b1d-4e3a-8c9b-2d7e0f6a1b85": "WorldEntities/Natural/Titanium.prefab",
}


def _item(key: Fragment, depth: int, discoveries: Optional[int] = None) -> PlaceableItem:
    return PlaceableItem(key, depth, discoveries)


FRAGMENT_ITEMS: Dict[Fragment, PlaceableItem] = {
    item.key: item for item in [
        _item(Fragment.SEAGLIDE, 0, 2),
        _item(Fragment.BEACON, 0, 2),
        _item(Fragment.LED_LIGHT, 0, 2),
        _item(Fragment.BATTERY_CHARGER, 50, 2),
        _item(Fragment.CONSTRUCTOR, 50, 3),
        _item(Fragment.WORKBENCH, 50, 3),
        _item(Fragment.GRAV_SPHERE, 50, 2),
        _item(Fragment.LASER_CUTTER, 80, 3),
        _item(Fragment.SEAMOTH, 80, 3),
        _item(Fragment.PROPULSION_CANNON, 80, 2),
        _item(Fragment.POWER_TRANSMITTER, 80, 1),
        _item(Fragment.BASE_BIOREACTOR, 100, 2),
        _item(Fragment.POWER_CELL_CHARGER, 100, 2),
        _item(Fragment.SCANNER_ROOM, 100, 3),
        _item(Fragment.STASIS_RIFLE, 150, 2),
        _item(Fragment.MOONPOOL, 150, 2),
        _item(Fragment.CYCLOPS_HULL, 200, 3),
        _item(Fragment.CYCLOPS_BRIDGE, 200, 3),
        _item(Fragment.CYCLOPS_ENGINE, 200, 3),
        _item(Fragment.EXOSUIT, 250, 4),
        _item(Fragment.EXOSUIT_PROPULSION_ARM, 250, 2),
        _item(Fragment.EXOSUIT_GRAPPLING_ARM, 250, 2),
        _item(Fragment.EXOSUIT_TORPEDO_ARM, 300, 2),
        _item(Fragment.BASE_NUCLEAR_REACTOR, 300, 3),
        _item(Fragment.THERMAL_PLANT, 300, 2),
        _item(Fragment.EXOSUIT_DRILL_ARM, 500, 2),
    ]
}


def build_class_id_table(prefab_files: Mapping[str, str]) -> Dict[Fragment, List[str]]:
    """
    Collect the class ids of every fragment prefab, grouped by fragment.

    Prefabs whose file name is not in FRAGMENT_DATA_PATHS are skipped.
    Variants keep the order in which they appear in prefab_files.
    """
    table: Dict[Fragment, List[str]] = {}

    for class_id, data_path in prefab_files.items():
        file_name = os.path.splitext(os.path.basename(data_path))[0]
        fragment = FRAGMENT_DATA_PATHS.get(file_name)
        if fragment is None:
            continue
        table.setdefault(fragment, []).append(class_id)

    return table


def reverse_class_ids(table: Mapping[Fragment, List[str]]) -> Dict[str, Fragment]:
    """Invert a class id table to allow class id -> Fragment lookups."""
    database: Dict[str, Fragment] = {}

    for fragment, class_ids in table.items():
        for class_id in class_ids:
            # First owner wins on duplicates
            database.setdefault(class_id, fragment)

    return database
