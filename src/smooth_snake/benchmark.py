"""Headless session driver and simulation throughput benchmark."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from smooth_snake.config import GameConfig
from smooth_snake.engine import GameState
from smooth_snake.food import BoardFullError
from smooth_snake.movement import Movement

logger = logging.getLogger(__name__)

_MOVEMENTS = list(Movement)


@dataclass
class SessionResult:
    """Outcome of a headless game session."""

    frames: int
    score: int
    board_full: bool
    state: dict


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_frames: int
    wall_time_seconds: float
    games_per_second: float
    frames_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, "
            f"{self.total_frames} frames in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.frames_per_second:.1f} frames/s"
        )


def run_session(
    config: GameConfig,
    frames: int,
    turn_chance: float = 0.05,
    rng: np.random.Generator | None = None,
) -> SessionResult:
    """Drive a game at the configured frame rate with random turns.

    Each frame a random movement is held with probability *turn_chance*,
    standing in for keyboard input. The session ends early once the board
    is full.
    """
    if frames < 1:
        raise ValueError("frames must be at least 1.")
    if not 0.0 <= turn_chance <= 1.0:
        raise ValueError("turn_chance must be between 0 and 1.")
    if rng is None:
        rng = np.random.default_rng(config.seed)

    game = GameState.from_config(config, rng=rng)
    played = 0
    board_full = False
    for _ in range(frames):
        movement = None
        if rng.random() < turn_chance:
            movement = _MOVEMENTS[int(rng.integers(len(_MOVEMENTS)))]
        played += 1
        try:
            game.process(config.frame_ms, movement)
        except BoardFullError:
            board_full = True
            logger.info("Board filled after %d frames.", played)
            break

    return SessionResult(
        frames=played,
        score=game.score,
        board_full=board_full,
        state=game.get_state(),
    )


def benchmark_throughput(
    *,
    num_games: int = 10,
    frames: int = 600,
    width: int = 20,
    height: int = 20,
    fps: int = 60,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw simulation throughput with random input."""
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if frames < 1:
        raise ValueError("frames must be at least 1.")

    rng = np.random.default_rng(seed)
    config = GameConfig(width=width, height=height, fps=fps)

    total_frames = 0
    start = time.perf_counter()
    for _ in range(num_games):
        session = run_session(config, frames, rng=rng)
        total_frames += session.frames

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_frames=total_frames,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        frames_per_second=total_frames / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
