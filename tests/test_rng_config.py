"""Tests for RandomSource and Config validation."""

import pytest

from gridsnake import Config, RandomSource, SnakeEngine
from gridsnake import config as config_module


class TestRandomSource:
    """Tests for RandomSource."""

    def test_values_stay_in_inclusive_range(self):
        """next_int covers both ends of the range."""
        rng = RandomSource(7)
        values = {rng.next_int(0, 3) for _ in range(500)}
        assert values == {0, 1, 2, 3}

    def test_single_value_range(self):
        """A one-value range always returns that value."""
        rng = RandomSource(7)
        assert all(rng.next_int(4, 4) == 4 for _ in range(10))

    def test_empty_range_raises(self):
        """low > high raises ValueError."""
        with pytest.raises(ValueError):
            RandomSource(7).next_int(5, 4)

    def test_same_seed_same_sequence(self):
        """Equal seeds give equal sequences."""
        a, b = RandomSource(99), RandomSource(99)
        assert [a.next_int(0, 100) for _ in range(20)] == [b.next_int(0, 100) for _ in range(20)]

    def test_unseeded_source_records_its_seed(self):
        """A clock-seeded source keeps the seed it used."""
        rng = RandomSource()
        assert isinstance(rng.seed, int)


class TestConfig:
    """Tests for Config defaults and validation."""

    def test_defaults_match_classic_game(self):
        """Default settings match the classic game and validate."""
        cfg = Config()
        assert (cfg.cols, cfg.rows) == (32, 24)
        assert cfg.move_interval == pytest.approx(0.12)
        assert cfg.initial_length == 5
        assert cfg.food_reward == 10
        assert cfg.start_position == (16, 12)
        cfg.validate()

    def test_explicit_start_position(self):
        """An explicit start overrides the grid centre."""
        assert Config(start=(3, 2)).start_position == (3, 2)

    def test_interval_starting_at_floor_is_accepted(self):
        """A starting interval equal to the floor is allowed."""
        engine = SnakeEngine(Config(move_interval=0.04, min_move_interval=0.04), RandomSource(0))
        assert engine.move_interval >= engine.cfg.min_move_interval

    def test_config_module_holds_no_shared_instance(self):
        """Each engine gets its own Config; the module exposes no global one."""
        assert not any(isinstance(v, Config) for v in vars(config_module).values())

    @pytest.mark.parametrize("overrides", [
        {"cols": 0},
        {"rows": -1},
        {"initial_length": 0},
        {"move_interval": 0},
        {"food_reward": 0},
        {"speedup_every": 0},
        {"speedup_factor": 1.0},
        {"speedup_factor": 0.0},
        {"min_move_interval": -0.1},
        {"move_interval": 0.02, "min_move_interval": 0.04},
        {"cols": 4, "rows": 4, "initial_length": 4, "start": (2, 1)},
        {"start": (40, 0)},
        {"cols": 2, "rows": 1, "initial_length": 2, "start": (1, 0)},
    ])
    def test_invalid_config_rejected_by_engine(self, overrides):
        """Unplayable settings raise ValueError when the engine is built."""
        with pytest.raises(ValueError):
            SnakeEngine(Config(**overrides), RandomSource(0))
