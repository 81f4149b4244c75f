"""Food placement on free cells and food consumption by the snake head."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

import numpy as np

from smooth_snake.geometry import EPSILON, Segment, Vector, segments

if TYPE_CHECKING:
    from smooth_snake.engine import GameState

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """The part of :class:`numpy.random.Generator` used for placement."""

    def integers(self, high: int) -> int | np.integer: ...


class BoardFullError(RuntimeError):
    """Raised when the snake covers every cell and food cannot be placed.

    For the player this is the winning condition, not a crash.
    """

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"No free cell left on the {width}x{height} board.")
        self.width = width
        self.height = height


def free_cells(
    width: int, height: int, body: Sequence[Vector],
) -> list[Vector]:
    """Return the centres of all cells not covered by the snake.

    Cells are enumerated column by column (x outer, y inner). Each body
    segment is tested against every cell centre at once.
    """
    xs, ys = np.meshgrid(
        np.arange(width) + 0.5, np.arange(height) + 0.5, indexing="ij",
    )
    xs = xs.ravel()
    ys = ys.ravel()

    occupied = np.zeros(xs.shape, dtype=bool)
    for segment in segments(list(body)):
        start, end = segment.start, segment.end
        first = np.hypot(xs - start.x, ys - start.y)
        second = np.hypot(end.x - xs, end.y - ys)
        occupied |= np.abs(segment.length() - (first + second)) < EPSILON

    free = ~occupied
    return [
        Vector(float(x), float(y))
        for x, y in zip(xs[free].tolist(), ys[free].tolist(), strict=True)
    ]


def place_food(
    width: int,
    height: int,
    body: Sequence[Vector],
    rng: RandomSource | None = None,
) -> Vector:
    """Pick a free cell uniformly at random and return its centre."""
    if rng is None:
        rng = np.random.default_rng()

    free = free_cells(width, height, body)
    if not free:
        logger.warning("No free cells available for food placement.")
        raise BoardFullError(width, height)

    return free[int(rng.integers(len(free)))]


def grow_tail(body: Sequence[Vector], amount: float = 1.0) -> deque[Vector]:
    """Extend the tail end of the body outward by *amount*.

    Tail segments shorter than EPSILON have no usable direction; they are
    dropped and their length is added to the extension so the total path
    length still grows by exactly *amount*.
    """
    points = list(body)
    while len(points) > 2:
        length = Segment(points[1], points[0]).length()
        if length >= EPSILON:
            break
        amount += length
        points.pop(0)

    tail = points[0]
    outward = Segment(points[1], tail).vector().normalize()
    points[0] = tail.add(outward.scale_by(amount))
    return deque(points)


def process_food(state: GameState) -> bool:
    """Eat the food if it lies on the head segment.

    Returns ``True`` when food was eaten. The tail grows by one unit and the
    score is incremented before new food is placed, so a
    :class:`BoardFullError` from placement leaves the final score counted.
    """
    head_segment = Segment(state.body[-2], state.body[-1])
    if not head_segment.is_point_inside(state.food):
        return False

    state.body = grow_tail(state.body)
    state.score += 1
    logger.debug(
        "Food eaten at (%.1f, %.1f); score is now %d.",
        state.food.x, state.food.y, state.score,
    )
    state.food = place_food(state.width, state.height, state.body, state.rng)
    return True
