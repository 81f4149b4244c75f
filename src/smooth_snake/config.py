"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from smooth_snake.movement import Movement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Parameters for constructing a game session.

    Supports JSON serialization so a session can be reproduced.
    """

    # Board
    width: int = 20
    height: int = 20

    # Snake
    speed: float = 0.005  # cells per millisecond
    initial_snake_length: int = 4
    initial_direction: str = "right"

    # Host loop
    fps: int = 60
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.speed < 0:
            raise ValueError("speed must be non-negative.")
        if self.initial_snake_length < 1:
            raise ValueError("initial_snake_length must be at least 1.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        # Raises ValueError for unknown names.
        Movement.parse(self.initial_direction)

    @property
    def movement(self) -> Movement:
        return Movement.parse(self.initial_direction)

    @property
    def frame_ms(self) -> float:
        """Milliseconds between host frames."""
        return 1000.0 / self.fps

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
