"""
Static data for a run.

StaticData bundles everything placement reads but never changes: the
biome catalogue, fragment variants, per-fragment placement info and the
alternate start boxes. Built-in tables are used unless data files are
given.

Biome CSV (header row required):
    Name,Region,CreatureSlots,MediumSlots,SmallSlots,FragmentRate,Prerequisite
SmallSlots, FragmentRate and Prerequisite may be blank.

Alternate start CSV (header row required), box values as (x_min, z_max,
x_max, z_min); a zone may have several rows:
    Zone,X1,Z1,X2,Z2

Loading is a one-shot job; `load_static_data_async` returns a Future the
run driver resolves before its first placement.
"""

import csv
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .content.biomes import Biome, Zone, VANILLA_BIOMES
from .content.fragments import (
    Fragment, PlaceableItem, DEFAULT_PREFAB_FILES, FRAGMENT_ITEMS, build_class_id_table,
)
from .content.starts import SpawnBox, ALTERNATE_STARTS
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class StaticData:
    """Read-only tables a run places against."""
    biomes: List[Biome]
    class_ids: Dict[Fragment, List[str]]
    items: Dict[Fragment, PlaceableItem]
    alternate_starts: Dict[Zone, List[SpawnBox]] = field(default_factory=dict)

    def item(self, key: Fragment) -> PlaceableItem:
        try:
            return self.items[key]
        except KeyError:
            raise ConfigurationError(f"Unknown fragment: {key}") from None


def _optional_int(value: str, default: int) -> int:
    value = (value or "").strip()
    return int(value) if value else default


def _optional_float(value: str) -> Optional[float]:
    value = (value or "").strip()
    return float(value) if value else None


def parse_biome_csv(path: PathLike) -> List[Biome]:
    """
    Read a biome catalogue.

    Raises:
        ConfigurationError: if the file can't be read or a row is malformed
    """
    biomes = []
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row in enumerate(csv.DictReader(f), start=2):
                try:
                    biomes.append(Biome(
                        name=row["Name"].strip(),
                        zone=Zone.parse(row["Region"].strip()),
                        creature_slots=int(row["CreatureSlots"]),
                        medium_slots=int(row["MediumSlots"]),
                        small_slots=_optional_int(row.get("SmallSlots"), -1),
                        fragment_rate=_optional_float(row.get("FragmentRate")),
                        prerequisite=(row.get("Prerequisite") or "").strip() or None,
                    ))
                except (KeyError, TypeError, ValueError) as e:
                    raise ConfigurationError(f"{path}:{line_no}: bad biome row: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read biome data {path}: {e}") from e

    if not biomes:
        raise ConfigurationError(f"No biomes in {path}")
    return biomes


def parse_alternate_start_csv(path: PathLike) -> Dict[Zone, List[SpawnBox]]:
    """
    Read the alternate start boxes.

    Raises:
        ConfigurationError: if the file can't be read or a row is malformed
    """
    starts: Dict[Zone, List[SpawnBox]] = {}
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row in enumerate(csv.DictReader(f), start=2):
                try:
                    zone = Zone.parse(row["Zone"].strip())
                    box = SpawnBox.from_corners([float(row[k]) for k in ("X1", "Z1", "X2", "Z2")])
                except (KeyError, TypeError, ValueError) as e:
                    raise ConfigurationError(f"{path}:{line_no}: bad start row: {e}") from e
                starts.setdefault(zone, []).append(box)
    except OSError as e:
        raise ConfigurationError(f"Failed to read alternate start data {path}: {e}") from e

    return starts


def load_static_data(
    biome_path: Optional[PathLike] = None,
    starts_path: Optional[PathLike] = None,
    prefab_files: Optional[Mapping[str, str]] = None,
) -> StaticData:
    """
    Assemble StaticData from files where given, built-in tables otherwise.

    Raises:
        ConfigurationError: on unreadable or malformed data, or a
            fragment with placement info but no variants
    """
    biomes = parse_biome_csv(biome_path) if biome_path else list(VANILLA_BIOMES)
    starts = parse_alternate_start_csv(starts_path) if starts_path else dict(ALTERNATE_STARTS)
    class_ids = build_class_id_table(prefab_files if prefab_files is not None else DEFAULT_PREFAB_FILES)

    missing = [f.value for f in FRAGMENT_ITEMS if f not in class_ids]
    if missing:
        raise ConfigurationError(f"No prefabs found for fragments: {missing}")

    logger.info(
        f"Loaded static data: {len(biomes)} biomes, {len(class_ids)} fragments, "
        f"{len(starts)} start zones"
    )
    return StaticData(
        biomes=biomes,
        class_ids=class_ids,
        items=dict(FRAGMENT_ITEMS),
        alternate_starts=starts,
    )


def load_static_data_async(executor: Optional[Executor] = None, **kwargs) -> Future:
    """
    Start loading static data in the background.

    Uses a one-off single worker pool unless an executor is given.
    """
    if executor is not None:
        return executor.submit(load_static_data, **kwargs)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="static-data")
    future = pool.submit(load_static_data, **kwargs)
    pool.shutdown(wait=False)
    return future
