"""
Alternate start tests.
"""

import pytest

from packages.randomiser.content.biomes import Zone
from packages.randomiser.content.starts import SpawnBox, ALTERNATE_STARTS, START_HEIGHT
from packages.randomiser.errors import ConfigurationError
from packages.randomiser.generation.starts import StartSelector, StartPoint
from packages.randomiser.state.rng import Random


class TestSpawnBox:
    """Box construction from stored corners."""

    def test_from_corners_order(self):
        box = SpawnBox.from_corners((-350, 100, -200, -50))
        assert (box.x_min, box.x_max, box.z_min, box.z_max) == (-350, -200, -50, 100)

    def test_inverted_box_rejected(self):
        with pytest.raises(ValueError):
            SpawnBox.from_corners((10, 0, -10, 5))

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            SpawnBox.from_corners((1, 2, 3))

    def test_contains_is_inclusive(self):
        box = SpawnBox(0, 10, -5, 5)
        assert box.contains(0, -5)
        assert box.contains(10, 5)
        assert not box.contains(11, 0)


class TestSelectStart:
    """StartSelector.select_start."""

    def test_vanilla_modes_keep_default(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        assert selector.select_start("Vanilla") is None
        assert selector.select_start("Vanilla (Lifepod)") is None
        assert rng_seed_42.counter == 0

    def test_random_single_zone_lands_in_box(self):
        box = SpawnBox(-100, -50, 20, 40)
        starts = {Zone.KELP: [box], Zone.LOST_RIVER: [SpawnBox(0, 1, 0, 1)]}
        for seed in range(30):
            point = StartSelector(starts, Random(seed)).select_start("Random")
            assert box.contains(point.x, point.z)
            assert point.y == START_HEIGHT

    def test_random_never_picks_void_or_deep_zones(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        zones = selector.candidate_zones("Random")
        assert Zone.NONE not in zones
        assert all(zone.accessible_depth <= 100 for zone in zones)
        assert Zone.KELP in zones

    def test_chaotic_includes_void(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        zones = selector.candidate_zones("Chaotic Random")
        assert Zone.NONE in zones
        assert len(zones) == len(ALTERNATE_STARTS)

    def test_named_zone(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        point = selector.select_start("Kelp")
        assert isinstance(point, StartPoint)
        assert any(box.contains(point.x, point.z) for box in ALTERNATE_STARTS[Zone.KELP])

    @pytest.mark.parametrize("alias,zone", [
        ("BulbZone", Zone.KOOSH_ZONE),
        ("Floating Island", Zone.FLOATING_ISLAND),
        ("Void", Zone.NONE),
    ])
    def test_aliases(self, rng_seed_42, alias, zone):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        assert selector.candidate_zones(alias) == [zone]
        point = selector.select_start(alias)
        assert any(box.contains(point.x, point.z) for box in ALTERNATE_STARTS[zone])

    def test_unchanged_keeps_default(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        assert selector.select_start("unchanged") is None

    def test_random_reachable_single_shallow_zone(self):
        box = SpawnBox(-100, -50, 20, 40)
        starts = {Zone.KELP: [box], Zone.DUNES: [SpawnBox(0, 1, 0, 1)], Zone.NONE: [SpawnBox(5, 6, 5, 6)]}
        for seed in range(30):
            point = StartSelector(starts, Random(seed)).select_start("random-reachable")
            assert box.contains(point.x, point.z)

    def test_fully_random_alias(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        assert selector.candidate_zones("fully-random") == selector.candidate_zones("Chaotic Random")

    def test_unknown_mode_raises(self, rng_seed_42):
        selector = StartSelector(ALTERNATE_STARTS, rng_seed_42)
        with pytest.raises(ConfigurationError):
            selector.select_start("Atlantis")

    def test_zone_without_boxes_raises(self, rng_seed_42):
        selector = StartSelector({Zone.KELP: [SpawnBox(0, 1, 0, 1)]}, rng_seed_42)
        with pytest.raises(ConfigurationError):
            selector.select_start("Dunes")

    def test_random_with_no_candidates_raises(self, rng_seed_42):
        selector = StartSelector({Zone.LOST_RIVER: [SpawnBox(0, 1, 0, 1)]}, rng_seed_42)
        with pytest.raises(ConfigurationError):
            selector.select_start("Random")

    def test_deterministic(self):
        a = StartSelector(ALTERNATE_STARTS, Random(9)).select_start("Chaotic Random")
        b = StartSelector(ALTERNATE_STARTS, Random(9)).select_start("Chaotic Random")
        assert a == b
