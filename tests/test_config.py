"""Tests for the game configuration dataclass."""

import json

import pytest

from smooth_snake.config import GameConfig
from smooth_snake.movement import Movement


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.width == 20
        assert cfg.height == 20
        assert cfg.speed == 0.005
        assert cfg.initial_snake_length == 4
        assert cfg.movement == Movement.RIGHT
        assert cfg.seed is None

    def test_frame_ms(self):
        assert GameConfig(fps=50).frame_ms == 20.0

    def test_direction_name_is_case_insensitive(self):
        assert GameConfig(initial_direction="Down").movement == Movement.DOWN

    @pytest.mark.parametrize("kwargs, message", [
        ({"width": 0}, "width and height"),
        ({"height": 0}, "width and height"),
        ({"speed": -1.0}, "speed"),
        ({"initial_snake_length": 0}, "initial_snake_length"),
        ({"fps": 0}, "fps"),
        ({"initial_direction": "sideways"}, "Unknown movement"),
    ])
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            GameConfig(**kwargs)

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.width = 30  # type: ignore[misc]

    def test_to_dict_serializable(self):
        serialized = json.dumps(GameConfig().to_dict())
        assert isinstance(serialized, str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(width=15, speed=0.01, initial_direction="left", seed=9)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()

        loaded = GameConfig.load(path)
        assert loaded == cfg
