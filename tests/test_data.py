"""
Static data tests: built-in tables, CSV loading, class id lookups.
"""

from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from packages.randomiser.content.biomes import Zone, VANILLA_BIOMES
from packages.randomiser.content.fragments import (
    Fragment, FRAGMENT_ITEMS, DEFAULT_PREFAB_FILES, build_class_id_table, reverse_class_ids,
)
from packages.randomiser.content.starts import SpawnBox
from packages.randomiser.data import (
    load_static_data, load_static_data_async, parse_biome_csv, parse_alternate_start_csv,
)
from packages.randomiser.errors import ConfigurationError


BIOME_CSV = """Name,Region,CreatureSlots,MediumSlots,SmallSlots,FragmentRate,Prerequisite
Kelp_Sand,Kelp,14,10,12,0.6,
Kelp_CaveFloor,Kelp,4,5,,,
LostRiver_Corridor,Lost River,6,8,,0.5,LaserCutter
"""

STARTS_CSV = """Zone,X1,Z1,X2,Z2
Kelp,-350,100,-200,-50
Kelp,150,350,300,200
Dunes,-1500,650,-1200,300
"""


class TestBuiltInTables:
    """Consistency of the built-in content."""

    def test_every_item_has_variants(self, static_data):
        for fragment in FRAGMENT_ITEMS:
            assert static_data.class_ids[fragment]

    def test_multi_variant_fragments(self, static_data):
        assert len(static_data.class_ids[Fragment.CONSTRUCTOR]) == 2
        assert len(static_data.class_ids[Fragment.CYCLOPS_HULL]) == 2

    def test_non_fragment_prefabs_skipped(self):
        table = build_class_id_table(DEFAULT_PREFAB_FILES)
        all_ids = {cid for ids in table.values() for cid in ids}
        assert "9f16a5c7-4b1d-4e3a-8c9b-2d7e0f6a1b85" not in all_ids

    def test_reverse_lookup(self):
        table = build_class_id_table({
            "id-1": "WorldEntities/Fragments/Seamoth_Fragment.prefab",
            "id-2": "WorldEntities/Fragments/Constructor_Fragment_InCrate.prefab",
        })
        assert reverse_class_ids(table) == {"id-1": Fragment.SEAMOTH, "id-2": Fragment.CONSTRUCTOR}

    def test_biome_names_unique(self):
        names = [b.name for b in VANILLA_BIOMES]
        assert len(names) == len(set(names))

    def test_item_lookup(self, static_data):
        assert static_data.item(Fragment.SEAMOTH).key == Fragment.SEAMOTH

    def test_missing_prefabs_rejected(self):
        with pytest.raises(ConfigurationError):
            load_static_data(prefab_files={"id-1": "WorldEntities/Fragments/Seamoth_Fragment.prefab"})


class TestBiomeCsv:
    """parse_biome_csv."""

    def test_parses_rows(self, tmp_path):
        path = tmp_path / "biomes.csv"
        path.write_text(BIOME_CSV, encoding="utf-8")
        biomes = parse_biome_csv(path)

        assert [b.name for b in biomes] == ["Kelp_Sand", "Kelp_CaveFloor", "LostRiver_Corridor"]
        kelp, cave, river = biomes
        assert kelp.zone == Zone.KELP
        assert kelp.small_slots == 12
        assert kelp.fragment_rate == 0.6
        assert cave.small_slots == cave.medium_slots
        assert cave.fragment_rate is None
        assert river.zone == Zone.LOST_RIVER
        assert river.prerequisite == "LaserCutter"

    def test_bad_row_raises(self, tmp_path):
        path = tmp_path / "biomes.csv"
        path.write_text(BIOME_CSV + "Broken,Kelp,lots,1,,,\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            parse_biome_csv(path)

    def test_unknown_zone_raises(self, tmp_path):
        path = tmp_path / "biomes.csv"
        path.write_text(BIOME_CSV + "Odd,Atlantis,1,1,,,\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            parse_biome_csv(path)

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "biomes.csv"
        path.write_text("Name,Region,CreatureSlots,MediumSlots,SmallSlots,FragmentRate,Prerequisite\n")
        with pytest.raises(ConfigurationError):
            parse_biome_csv(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError):
            parse_biome_csv(tmp_path / "nope.csv")


class TestStartCsv:
    """parse_alternate_start_csv."""

    def test_parses_multiple_boxes(self, tmp_path):
        path = tmp_path / "starts.csv"
        path.write_text(STARTS_CSV, encoding="utf-8")
        starts = parse_alternate_start_csv(path)

        assert len(starts[Zone.KELP]) == 2
        assert starts[Zone.KELP][0] == SpawnBox(-350, -200, -50, 100)
        assert starts[Zone.DUNES] == [SpawnBox(-1500, -1200, 300, 650)]

    def test_inverted_box_raises(self, tmp_path):
        path = tmp_path / "starts.csv"
        path.write_text("Zone,X1,Z1,X2,Z2\nKelp,100,0,-100,50\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            parse_alternate_start_csv(path)

    def test_files_used_by_loader(self, tmp_path):
        biomes = tmp_path / "biomes.csv"
        starts = tmp_path / "starts.csv"
        biomes.write_text(BIOME_CSV, encoding="utf-8")
        starts.write_text(STARTS_CSV, encoding="utf-8")

        data = load_static_data(biome_path=biomes, starts_path=starts)
        assert len(data.biomes) == 3
        assert set(data.alternate_starts) == {Zone.KELP, Zone.DUNES}


class TestAsyncLoad:
    """Background loading."""

    def test_returns_future(self):
        future = load_static_data_async()
        assert isinstance(future, Future)
        assert len(future.result(timeout=10).items) == len(FRAGMENT_ITEMS)

    def test_uses_given_executor(self):
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = load_static_data_async(executor)
            assert future.result(timeout=10).biomes

    def test_error_surfaces_on_result(self, tmp_path):
        future = load_static_data_async(biome_path=tmp_path / "nope.csv")
        with pytest.raises(ConfigurationError):
            future.result(timeout=10)
