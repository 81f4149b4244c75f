"""Game state composing continuous movement and food consumption."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from smooth_snake.config import GameConfig
from smooth_snake.food import (
    BoardFullError,
    RandomSource,
    place_food,
    process_food,
)
from smooth_snake.geometry import EPSILON, Vector, path_length, round_half_away
from smooth_snake.movement import Movement, process_movement

logger = logging.getLogger(__name__)


class GameState:
    """Single-snake game advanced by elapsed time rather than grid ticks.

    The state owns the board configuration, the snake body (a polyline of
    points, tail first and head last), the food and the score. Each call to
    :meth:`process` moves the snake by ``speed * timespan`` cells and then
    checks whether the head has reached the food.

    Calls to :meth:`process` must be serialized by the host.
    """

    def __init__(
        self,
        width: int,
        height: int,
        speed: float,
        initial_snake_length: int,
        initial_direction: Vector | Movement,
        rng: RandomSource | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be at least 1x1.")
        if speed < 0:
            raise ValueError("speed must be non-negative.")
        if initial_snake_length < 1:
            raise ValueError("initial_snake_length must be at least 1.")
        if isinstance(initial_direction, Movement):
            initial_direction = initial_direction.vector
        if initial_direction.length() < EPSILON:
            raise ValueError("initial_direction must be a non-zero vector.")

        self.width = width
        self.height = height
        self.speed = speed
        self.initial_snake_length = initial_snake_length
        self.initial_direction = initial_direction
        self.rng = rng if rng is not None else np.random.default_rng()

        self.score = 0
        self.tick = 0
        self.board_full = False
        self.direction = initial_direction
        self.next_direction = initial_direction
        self.body: deque[Vector] = deque()
        self.food = Vector(0.5, 0.5)
        self._reset()

    @classmethod
    def from_config(
        cls, config: GameConfig, rng: RandomSource | None = None,
    ) -> GameState:
        """Build a game from a :class:`GameConfig`, seeding its RNG."""
        if rng is None:
            rng = np.random.default_rng(config.seed)
        return cls(
            width=config.width,
            height=config.height,
            speed=config.speed,
            initial_snake_length=config.initial_snake_length,
            initial_direction=config.movement,
            rng=rng,
        )

    @property
    def head(self) -> Vector:
        return self.body[-1]

    @property
    def snake_body(self) -> tuple[Vector, ...]:
        """Return the body points ordered tail to head."""
        return tuple(self.body)

    def path_length(self) -> float:
        """Return the total length of the snake's polyline."""
        return path_length(self.body)

    def process(self, timespan: float, movement: Movement | None = None) -> bool:
        """Advance the game by *timespan* milliseconds.

        *movement* is the command held by the player during this frame, if
        any. Returns ``True`` when food was eaten in this step.

        Once the board has filled the game is over: further calls raise
        :class:`BoardFullError` without changing the state.
        """
        if self.board_full:
            raise BoardFullError(self.width, self.height)

        process_movement(self, timespan, movement)
        self.tick += 1
        try:
            return process_food(self)
        except BoardFullError:
            self.board_full = True
            logger.info("Board filled with score %d.", self.score)
            raise

    def restart(self) -> None:
        """Start a new session with the same parameters and RNG."""
        self._reset()
        logger.info(
            "Game restarted on a %dx%d board.", self.width, self.height,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "width": self.width,
            "height": self.height,
            "speed": self.speed,
            "score": self.score,
            "tick": self.tick,
            "board_full": self.board_full,
            "direction": self.direction.to_list(),
            "next_direction": self.next_direction.to_list(),
            "food": self.food.to_list(),
            "snake": [point.to_list() for point in self.body],
        }

    def _reset(self) -> None:
        # Head sits on the cell centre nearest the middle of the board.
        head = Vector(
            round_half_away(self.width / 2) - 0.5,
            round_half_away(self.height / 2) - 0.5,
        )
        tail = head.subtract(
            self.initial_direction.scale_by(self.initial_snake_length),
        )
        self.score = 0
        self.tick = 0
        self.board_full = False
        self.direction = self.initial_direction
        self.next_direction = self.initial_direction
        self.body = deque([tail, head])
        self.food = place_food(self.width, self.height, self.body, self.rng)
