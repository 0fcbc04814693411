"""
Tests for GameConfig.
"""

import pytest

from wave_defender.config import GameConfig


class TestGameConfig:
    """Defaults, dictionary loading and validation."""

    def test_defaults(self):
        config = GameConfig()

        assert config.size == (700, 650)
        assert config.fps == 60
        assert config.initial_enemy_speed == 1.0
        assert config.speed_increment == 0.15
        assert config.drop_distance == 20
        assert config.enemy_fire_chance == 0.002
        assert config.invasion_line == 570

    def test_from_dict_overrides_defaults(self):
        config = GameConfig.from_dict({"width": 800, "log_level": "debug"})

        assert config.width == 800
        assert config.height == 650
        assert config.to_dict()["log_level"] == "debug"

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError, match="Unknown config keys: colour"):
            GameConfig.from_dict({"colour": "red"})

    @pytest.mark.parametrize(
        "settings",
        [
            {"width": 0},
            {"fps": -1},
            {"enemy_fire_chance": 1.5},
            {"max_columns": 3},
            {"log_level": "chatty"},
        ],
    )
    def test_invalid_values_rejected(self, settings):
        with pytest.raises(ValueError):
            GameConfig.from_dict(settings)
