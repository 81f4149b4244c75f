"""Two-dimensional vectors and polyline segments with tolerant comparisons."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

# Tolerance for all coordinate comparisons. Point-on-segment tests add two
# lengths together, so this has to absorb the compounded rounding error.
EPSILON = 0.01


class DegenerateVectorError(ValueError):
    """Raised when normalizing a vector whose length is below EPSILON."""


def are_equal(a: float, b: float) -> bool:
    """Compare two floats within EPSILON."""
    return abs(a - b) < EPSILON


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero (2.5 -> 3.0)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Vector:
    """Immutable 2D vector in board coordinates (x right, y down)."""

    x: float
    y: float

    def add(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def scale_by(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Return the unit vector pointing the same way.

        Raises :class:`DegenerateVectorError` when the length is below
        EPSILON instead of producing inf/nan components.
        """
        length = self.length()
        if length < EPSILON:
            raise DegenerateVectorError(
                f"Cannot normalize near-zero vector ({self.x}, {self.y})."
            )
        return self.scale_by(1.0 / length)

    def equal_to(self, other: Vector) -> bool:
        return are_equal(self.x, other.x) and are_equal(self.y, other.y)

    def is_opposite(self, other: Vector) -> bool:
        """Check whether ``self + other`` is (approximately) the zero vector."""
        return are_equal(self.x + other.x, 0.0) and are_equal(self.y + other.y, 0.0)

    def to_list(self) -> list[float]:
        return [self.x, self.y]

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.subtract(other)

    def __mul__(self, factor: float) -> Vector:
        return self.scale_by(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


class Segment:
    """A transient view of two existing points.

    Segments are built on demand from the snake body and never stored
    alongside it, so they cannot go stale when the body changes.
    """

    __slots__ = ("start", "end")

    def __init__(self, start: Vector, end: Vector) -> None:
        self.start = start
        self.end = end

    def vector(self) -> Vector:
        return self.end.subtract(self.start)

    def length(self) -> float:
        return self.vector().length()

    def is_point_inside(self, point: Vector) -> bool:
        """Check whether *point* lies on the segment, endpoints included."""
        first = Segment(self.start, point).length()
        second = Segment(point, self.end).length()
        return are_equal(self.length(), first + second)

    def point_at(self, distance: float) -> Vector:
        """Return the point *distance* along the segment from its start."""
        length = self.length()
        if not 0.0 <= distance < length:
            raise ValueError(
                f"distance {distance} outside segment of length {length}."
            )
        return self.start.add(self.vector().scale_by(distance / length))

    def __repr__(self) -> str:
        return f"Segment({self.start!r}, {self.end!r})"


def segments(points: Sequence[Vector]) -> Iterator[Segment]:
    """Yield the consecutive segments of a polyline."""
    for i in range(len(points) - 1):
        yield Segment(points[i], points[i + 1])


def path_length(points: Iterable[Vector]) -> float:
    """Sum the lengths of consecutive segments of a polyline."""
    return sum(segment.length() for segment in segments(list(points)))
