"""
Tests for domain/config.py - settings merge and bounds validation.
"""

import dataclasses
import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wrapsnake.domain.config import GameConfig, ValidationResult, ConfigurationError


ROWS_ERROR = "Wrong settings. The value of rows_count must be in the range [10, 30]."
COLS_ERROR = "Wrong settings. The value of cols_count must be in the range [10, 30]."
SPEED_ERROR = "Wrong settings. The value of speed must be in the range [1, 10]."
WIN_ERROR = "Wrong settings. The value of win_food_count must be in the range [5, 50]."


class TestGameConfigInit:
    """Tests for building a config from defaults and overrides."""

    def test_defaults(self):
        config = GameConfig.init()
        assert config.rows_count == 21
        assert config.cols_count == 21
        assert config.speed == 2
        assert config.win_food_count == 50

    def test_overrides_replace_only_given_fields(self):
        config = GameConfig.init({"speed": 5, "win_food_count": 20})
        assert config.speed == 5
        assert config.win_food_count == 20
        assert config.rows_count == 21

    def test_camel_case_aliases_are_accepted(self):
        config = GameConfig.init({"rowsCount": 12, "colsCount": 14, "winFoodCount": 7})
        assert (config.rows_count, config.cols_count, config.win_food_count) == (12, 14, 7)

    def test_unknown_keys_are_ignored(self):
        config = GameConfig.init({"colour": "green"})
        assert config == GameConfig()

    def test_none_values_keep_defaults(self):
        config = GameConfig.init({"rows_count": None, "speed": 3})
        assert config.rows_count == 21
        assert config.speed == 3

    def test_config_is_immutable(self):
        config = GameConfig.init()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.speed = 9

    def test_defaults_are_not_shared_between_configs(self):
        GameConfig.init({"speed": 9})
        assert GameConfig.init().speed == 2

    def test_tick_interval(self):
        assert GameConfig.init({"speed": 2}).tick_interval == 0.5
        assert GameConfig.init({"speed": 10}).tick_interval == pytest.approx(0.1)


class TestGameConfigFromEnv:
    """Tests for reading settings from environment variables."""

    def test_reads_integers(self):
        config = GameConfig.from_env({"SNAKE_ROWS_COUNT": "15", "SNAKE_SPEED": "4"})
        assert config.rows_count == 15
        assert config.speed == 4
        assert config.cols_count == 21

    def test_non_integer_value_fails_validation(self):
        config = GameConfig.from_env({"SNAKE_SPEED": "fast"})
        result = config.validate()
        assert result.is_valid is False
        assert result.errors == [SPEED_ERROR]

    def test_empty_values_are_skipped(self):
        assert GameConfig.from_env({"SNAKE_ROWS_COUNT": ""}) == GameConfig()


class TestValidate:
    """Tests for GameConfig.validate()."""

    @pytest.mark.parametrize("rows, cols, speed, win", [
        (10, 10, 1, 5),
        (30, 30, 10, 50),
        (21, 21, 2, 50),
        (15, 25, 6, 20),
    ])
    def test_values_within_bounds_are_valid(self, rows, cols, speed, win):
        result = GameConfig.init({
            "rows_count": rows, "cols_count": cols, "speed": speed, "win_food_count": win
        }).validate()
        assert result.is_valid is True
        assert result.errors == []

    @pytest.mark.parametrize("overrides, expected", [
        ({"rows_count": 9}, ROWS_ERROR),
        ({"rows_count": 31}, ROWS_ERROR),
        ({"cols_count": 9}, COLS_ERROR),
        ({"cols_count": 31}, COLS_ERROR),
        ({"speed": 0}, SPEED_ERROR),
        ({"speed": 11}, SPEED_ERROR),
        ({"win_food_count": 4}, WIN_ERROR),
        ({"win_food_count": 51}, WIN_ERROR),
    ])
    def test_single_field_out_of_bounds(self, overrides, expected):
        result = GameConfig.init(overrides).validate()
        assert result.is_valid is False
        assert result.errors == [expected]

    def test_all_violations_are_collected_in_order(self):
        result = GameConfig.init({
            "rows_count": 5, "cols_count": 100, "speed": 0, "win_food_count": 60
        }).validate()
        assert result.is_valid is False
        assert result.errors == [ROWS_ERROR, COLS_ERROR, SPEED_ERROR, WIN_ERROR]

    def test_two_violations(self):
        result = GameConfig.init({"cols_count": 1, "win_food_count": 1}).validate()
        assert result.errors == [COLS_ERROR, WIN_ERROR]

    def test_bool_and_float_values_are_rejected(self):
        result = GameConfig.init({"speed": True, "rows_count": 12.0}).validate()
        assert result.errors == [ROWS_ERROR, SPEED_ERROR]


class TestValidationResult:

    def test_raise_for_errors_on_valid_result_is_noop(self):
        ValidationResult().raise_for_errors()

    def test_raise_for_errors_carries_every_error(self):
        result = GameConfig.init({"rows_count": 1, "speed": 99}).validate()
        with pytest.raises(ConfigurationError) as exc_info:
            result.raise_for_errors()
        assert exc_info.value.errors == [ROWS_ERROR, SPEED_ERROR]
