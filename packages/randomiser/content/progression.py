"""
Progression tables.

Declarative data for the progression graph:
- UNLOCKED_BY: fragment -> the item its scans unlock (the dependent).
- UNLOCK_RULES: dependent -> UnlockRule. A rule lists every prerequisite
  that has to be placed before the dependent unlocks, and the items that
  unlock together with it.
- DEPTH_GRANTS: unlocked item -> depth (m) the player can reach with it.

Only dependents with a rule are progression relevant.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping

from .fragments import Fragment


@dataclass(frozen=True)
class UnlockRule:
    """Prerequisites of one dependent and its fan-out on unlock."""
    requires: FrozenSet[str]
    also_unlocks: FrozenSet[str] = frozenset()


def _rule(requires, also_unlocks=()) -> UnlockRule:
    return UnlockRule(
        frozenset(f.value if isinstance(f, Fragment) else f for f in requires),
        frozenset(also_unlocks),
    )


UNLOCKED_BY: Dict[str, str] = {
    Fragment.BASE_BIOREACTOR.value: "BaseBioReactor",
    Fragment.BASE_NUCLEAR_REACTOR.value: "BaseNuclearReactor",
    Fragment.BATTERY_CHARGER.value: "BatteryCharger",
    Fragment.BEACON.value: "Beacon",
    Fragment.CONSTRUCTOR.value: "Constructor",
    Fragment.CYCLOPS_BRIDGE.value: "Cyclops",
    Fragment.CYCLOPS_ENGINE.value: "Cyclops",
    Fragment.CYCLOPS_HULL.value: "Cyclops",
    Fragment.EXOSUIT.value: "Exosuit",
    Fragment.EXOSUIT_DRILL_ARM.value: "ExosuitDrillArmModule",
    Fragment.EXOSUIT_GRAPPLING_ARM.value: "ExosuitGrapplingArmModule",
    Fragment.EXOSUIT_PROPULSION_ARM.value: "ExosuitPropulsionArmModule",
    Fragment.EXOSUIT_TORPEDO_ARM.value: "ExosuitTorpedoArmModule",
    Fragment.GRAV_SPHERE.value: "Gravsphere",
    Fragment.LASER_CUTTER.value: "LaserCutter",
    Fragment.LED_LIGHT.value: "LEDLight",
    Fragment.MOONPOOL.value: "BaseMoonpool",
    Fragment.POWER_CELL_CHARGER.value: "PowerCellCharger",
    Fragment.POWER_TRANSMITTER.value: "PowerTransmitter",
    Fragment.PROPULSION_CANNON.value: "PropulsionCannon",
    Fragment.SCANNER_ROOM.value: "BaseMapRoom",
    Fragment.SEAGLIDE.value: "Seaglide",
    Fragment.SEAMOTH.value: "Seamoth",
    Fragment.STASIS_RIFLE.value: "StasisRifle",
    Fragment.THERMAL_PLANT.value: "ThermalPlant",
    Fragment.WORKBENCH.value: "Workbench",
}


UNLOCK_RULES: Dict[str, UnlockRule] = {
    "Seaglide": _rule([Fragment.SEAGLIDE]),
    "Seamoth": _rule(
        [Fragment.SEAMOTH],
        ["VehicleHullModule1", "VehicleStorageModule", "SeamothSolarCharge"],
    ),
    "Cyclops": _rule(
        [Fragment.CYCLOPS_HULL, Fragment.CYCLOPS_BRIDGE, Fragment.CYCLOPS_ENGINE],
        ["CyclopsHullModule1", "CyclopsShieldModule", "CyclopsSonarModule"],
    ),
    "Exosuit": _rule(
        [Fragment.EXOSUIT],
        ["ExoHullModule1", "ExosuitJetUpgradeModule"],
    ),
    "Workbench": _rule([Fragment.WORKBENCH], ["VehicleHullModule2"]),
    "BaseMoonpool": _rule([Fragment.MOONPOOL], ["BaseUpgradeConsole"]),
    "LaserCutter": _rule([Fragment.LASER_CUTTER]),
    "PropulsionCannon": _rule([Fragment.PROPULSION_CANNON]),
    "ExosuitDrillArmModule": _rule([Fragment.EXOSUIT_DRILL_ARM]),
    "ExosuitGrapplingArmModule": _rule([Fragment.EXOSUIT_GRAPPLING_ARM]),
    "ExosuitPropulsionArmModule": _rule([Fragment.EXOSUIT_PROPULSION_ARM]),
    "Constructor": _rule([Fragment.CONSTRUCTOR]),
}


DEPTH_GRANTS: Mapping[str, int] = {
    "Seaglide": 200,
    "Seamoth": 300,
    "VehicleHullModule1": 400,
    "VehicleHullModule2": 600,
    "Cyclops": 500,
    "CyclopsHullModule1": 900,
    "Exosuit": 900,
    "ExoHullModule1": 1300,
}
