"""
Config tests: bounds, ordered pairs, file loading.
"""

import json

import pytest

from packages.randomiser.config import RandomiserConfig, CONFIG_BOUNDS
from packages.randomiser.errors import ConfigurationError


class TestSanitise:
    """RandomiserConfig.sanitise."""

    def test_defaults_are_valid(self):
        assert RandomiserConfig().sanitise() == []

    def test_out_of_range_reset(self):
        config = RandomiserConfig(max_biomes_per_fragment=2, max_fragments_per_biome=50)
        reset = config.sanitise()
        assert set(reset) == {"max_biomes_per_fragment", "max_fragments_per_biome"}
        assert config.max_biomes_per_fragment == CONFIG_BOUNDS["max_biomes_per_fragment"][3]
        assert config.max_fragments_per_biome == CONFIG_BOUNDS["max_fragments_per_biome"][3]

    def test_bounds_inclusive(self):
        config = RandomiserConfig(max_biomes_per_fragment=3, depth_search_step=500)
        assert config.sanitise() == []

    def test_non_numeric_reset(self):
        config = RandomiserConfig(fragment_spawn_chance_min="lots", depth_search_step=True)
        reset = config.sanitise()
        assert "fragment_spawn_chance_min" in reset
        assert "depth_search_step" in reset
        assert config.fragment_spawn_chance_min == 0.3
        assert config.depth_search_step == 50

    def test_float_in_int_field_reset(self):
        config = RandomiserConfig(max_biomes_per_fragment=3.5, min_fragments_to_unlock=1.5)
        reset = config.sanitise()
        assert set(reset) == {"max_biomes_per_fragment", "min_fragments_to_unlock"}
        assert config.max_biomes_per_fragment == 5
        assert config.min_fragments_to_unlock == 1

    def test_int_in_float_field_kept(self):
        config = RandomiserConfig(fragment_spawn_chance_min=0, fragment_spawn_chance_max=1)
        assert config.sanitise() == []

    def test_wrong_typed_flags_reset(self):
        config = RandomiserConfig(seed="abc", spawn_point=7, randomise_recipes="yes", randomise_fragments=1)
        reset = config.sanitise()
        assert set(reset) == {"seed", "spawn_point", "randomise_recipes", "randomise_fragments"}
        assert config.seed == 0
        assert config.spawn_point == "Vanilla"
        assert config.randomise_recipes is False
        assert config.randomise_fragments is True

    def test_bool_seed_reset(self):
        config = RandomiserConfig(seed=True)
        assert config.sanitise() == ["seed"]

    def test_misordered_pair_reset_together(self):
        config = RandomiserConfig(fragment_spawn_chance_min=0.9, fragment_spawn_chance_max=0.4)
        reset = config.sanitise()
        assert reset == ["fragment_spawn_chance_min", "fragment_spawn_chance_max"]
        assert (config.fragment_spawn_chance_min, config.fragment_spawn_chance_max) == (0.3, 0.6)

    def test_misordered_discoveries(self):
        config = RandomiserConfig(min_fragments_to_unlock=8, max_fragments_to_unlock=2)
        config.sanitise()
        assert config.min_fragments_to_unlock <= config.max_fragments_to_unlock

    def test_flags_untouched(self):
        config = RandomiserConfig(randomise_recipes=True, spawn_point="Kelp")
        config.sanitise()
        assert config.randomise_recipes is True
        assert config.spawn_point == "Kelp"


class TestLoad:
    """Config files."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert RandomiserConfig.load(tmp_path / "absent.json") == RandomiserConfig()

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            RandomiserConfig.load(path)

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            RandomiserConfig.load(path)

    def test_load_sanitises_and_ignores_unknown_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "seed": 1234,
            "spawn_point": "Random",
            "max_biomes_per_fragment": 99,
            "colour": "blue",
        }), encoding="utf-8")
        config = RandomiserConfig.load(path)
        assert config.seed == 1234
        assert config.spawn_point == "Random"
        assert config.max_biomes_per_fragment == 5

    def test_fractional_counts_from_file_reset(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "max_biomes_per_fragment": 3.5,
            "min_fragments_to_unlock": 1.5,
            "max_fragments_to_unlock": 4,
            "randomise_num_fragments": True,
        }), encoding="utf-8")
        config = RandomiserConfig.load(path)
        assert config.max_biomes_per_fragment == 5
        assert config.min_fragments_to_unlock == 1
        assert config.max_fragments_to_unlock == 4

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = RandomiserConfig(seed=55, randomise_num_fragments=True, max_fragments_per_biome=7)
        config.save(path)
        assert RandomiserConfig.load(path) == config
