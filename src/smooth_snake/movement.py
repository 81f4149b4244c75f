"""Continuous snake movement with turns pinned to grid rounding boundaries."""

from __future__ import annotations

import enum
import logging
import math
from collections import deque
from collections.abc import Sequence
from typing import TYPE_CHECKING

from smooth_snake.geometry import (
    Segment,
    Vector,
    are_equal,
    round_half_away,
)

if TYPE_CHECKING:
    from smooth_snake.engine import GameState

logger = logging.getLogger(__name__)


class InvalidTimespanError(ValueError):
    """Raised when a step is requested with a negative or non-finite timespan."""


class Movement(enum.Enum):
    """Cardinal movement commands with (x_delta, y_delta) values.

    The y axis points down the board, so UP decreases y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def vector(self) -> Vector:
        """Return the unit vector for this movement."""
        dx, dy = self.value
        return Vector(float(dx), float(dy))

    @classmethod
    def parse(cls, name: str) -> Movement:
        """Look up a movement by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown movement: {name!r}.") from None


def retract_tail(body: Sequence[Vector], distance: float) -> list[Vector]:
    """Shorten the body by *distance* from the tail end.

    Whole segments are consumed while the budget covers them; the first
    segment that is longer than what is left gets a new interpolated tail
    point. A budget that covers the whole body collapses the tail onto the
    last point.
    """
    points = list(body)
    remaining = distance
    while len(points) > 1:
        segment = Segment(points[0], points[1])
        length = segment.length()
        if length <= remaining:
            remaining -= length
            points.pop(0)
        else:
            points[0] = segment.point_at(remaining)
            return points

    return [points[0], points[0]]


def find_breakpoint(old_head: Vector, new_head: Vector) -> Vector | None:
    """Return the exact point where the head's rounded cell index changes.

    Only the first crossing is reported. When both axes change in a single
    step the x axis wins. Returns ``None`` if neither rounded coordinate
    changes.
    """
    old_x = round_half_away(old_head.x)
    old_y = round_half_away(old_head.y)
    new_x = round_half_away(new_head.x)
    new_y = round_half_away(new_head.y)

    if not are_equal(old_x, new_x):
        component = old_x + (0.5 if new_x > old_x else -0.5)
        return Vector(component, old_head.y)
    if not are_equal(old_y, new_y):
        component = old_y + (0.5 if new_y > old_y else -0.5)
        return Vector(old_head.x, component)
    return None


def advance_body(
    body: Sequence[Vector],
    direction: Vector,
    next_direction: Vector,
    distance: float,
) -> tuple[deque[Vector], Vector]:
    """Move the body forward by *distance* and resolve a pending turn.

    The head's path is laid out first (straight, or through the turn
    breakpoint) and the tail is then retracted along the extended
    polyline, so the total path length is preserved even when one step is
    longer than the whole snake. Returns the rebuilt body and the direction
    the head ends up moving in.
    """
    points = list(body)
    old_head = points.pop()
    new_head = old_head.add(direction.scale_by(distance))

    # A turn is only taken at a rounding boundary; otherwise it stays pending.
    if not direction.equal_to(next_direction) and not direction.is_opposite(
        next_direction,
    ):
        breakpoint_ = find_breakpoint(old_head, new_head)
        if breakpoint_ is not None:
            remaining = distance - old_head.subtract(breakpoint_).length()
            new_head = breakpoint_.add(next_direction.scale_by(remaining))
            if remaining > 0:
                points.append(breakpoint_)
            logger.debug(
                "Turned at (%.3f, %.3f) towards (%g, %g).",
                breakpoint_.x, breakpoint_.y, next_direction.x, next_direction.y,
            )
            direction = next_direction

    points.append(new_head)
    return deque(retract_tail(points, distance)), direction


def process_movement(
    state: GameState,
    timespan: float,
    movement: Movement | None = None,
) -> None:
    """Advance *state* by *timespan* milliseconds of movement."""
    if not math.isfinite(timespan) or timespan < 0:
        raise InvalidTimespanError(
            f"timespan must be a finite, non-negative number, got {timespan}."
        )

    if movement is not None:
        state.next_direction = movement.vector

    distance = state.speed * timespan
    state.body, state.direction = advance_body(
        state.body, state.direction, state.next_direction, distance,
    )
