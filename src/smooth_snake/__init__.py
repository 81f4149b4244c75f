"""Smooth Snake — continuous-movement snake simulation core."""

from smooth_snake.config import GameConfig
from smooth_snake.engine import GameState
from smooth_snake.food import BoardFullError, place_food
from smooth_snake.geometry import DegenerateVectorError, Segment, Vector
from smooth_snake.movement import InvalidTimespanError, Movement

__all__ = [
    "BoardFullError",
    "DegenerateVectorError",
    "GameConfig",
    "GameState",
    "InvalidTimespanError",
    "Movement",
    "Segment",
    "Vector",
    "place_food",
]
