"""Geometry primitives for the cutting engine: points and exact line segments."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

# Tolerance used by Segment.contains_in_range to absorb rounding from the
# intersection solve.
RANGE_TOLERANCE = 0.01


@dataclass(frozen=True)
class Point:
    """An immutable 2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def as_point(value: Any) -> Point:
    """
    Normalise a point-like value to a Point.

    :param value: Point, (x, y) pair, or any object with x and y attributes.
    :return: Point
    """
    if isinstance(value, Point):
        return value
    if hasattr(value, "x") and hasattr(value, "y"):
        return Point(float(value.x), float(value.y))
    x, y = value
    return Point(float(x), float(y))


def squared_distance(p1: Point, p2: Point) -> float:
    """Squared Euclidean distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def point_in_polygon(point: Point, vertices: Sequence[Point]) -> bool:
    """
    Even-odd ray casting test.

    Points exactly on a horizontal crossing are treated as inside.

    :param point: Query point
    :param vertices: Closed polygon, last vertex connects to the first
    :return: True if the point lies inside the polygon
    """
    x, y = point.x, point.y
    inside = False
    n = len(vertices)
    for i in range(n):
        j = (i - 1) % n
        xi, yi = vertices[i].x, vertices[i].y
        xj, yj = vertices[j].x, vertices[j].y
        if (yi > y) != (yj > y):
            crossing_x = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x == crossing_x:
                return True
            if x < crossing_x:
                inside = not inside
    return inside


class Segment:
    """
    Finite line segment stored as the line a*x + b*y = c plus its bounding box.

    The coefficients are computed once in the constructor and never change.
    """

    __slots__ = ("_p1", "_p2", "_a", "_b", "_c", "_min_x", "_max_x", "_min_y", "_max_y")

    def __init__(self, p1: Point, p2: Point) -> None:
        p1 = as_point(p1)
        p2 = as_point(p2)
        self._p1 = p1
        self._p2 = p2

        self._a = p2.y - p1.y
        self._b = p1.x - p2.x
        self._c = self._a * p1.x + self._b * p1.y

        self._min_x = min(p1.x, p2.x)
        self._max_x = max(p1.x, p2.x)
        self._min_y = min(p1.y, p2.y)
        self._max_y = max(p1.y, p2.y)

    def __repr__(self) -> str:
        return f"Segment({self._p1!r}, {self._p2!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self._p1 == other._p1 and self._p2 == other._p2

    def __hash__(self) -> int:
        return hash((self._p1, self._p2))

    @property
    def coefficients(self) -> Tuple[float, float, float]:
        """(a, b, c) of the line equation a*x + b*y = c."""
        return (self._a, self._b, self._c)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)"""
        return (self._min_x, self._min_y, self._max_x, self._max_y)

    @property
    def length(self) -> float:
        return squared_distance(self._p1, self._p2) ** 0.5

    def endpoints(self) -> Tuple[Point, Point]:
        """Return the two end points. Points are immutable so the segment cannot be altered through them."""
        return (self._p1, self._p2)

    def contains_in_range(self, pt: Point) -> bool:
        """
        Check whether pt lies within the bounding box, grown by RANGE_TOLERANCE on every side.

        Together with pt lying on the infinite line this means pt is on the segment.
        """
        return (self._min_x <= pt.x + RANGE_TOLERANCE
                and pt.x - RANGE_TOLERANCE <= self._max_x
                and self._min_y <= pt.y + RANGE_TOLERANCE
                and pt.y - RANGE_TOLERANCE <= self._max_y)

    def intersect(self, other: Segment) -> Point | None:
        """
        Intersection point of two finite segments.

        Parallel and coincident lines report no intersection.

        :param other: Segment to intersect with
        :return: Point or None when the segments do not reach each other
        """
        a1, b1, c1 = self._a, self._b, self._c
        a2, b2, c2 = other.coefficients
        det = a1 * b2 - a2 * b1
        if det == 0:
            return None

        result = Point(
            (c1 * b2 - b1 * c2) / det,
            (a1 * c2 - a2 * c1) / det,
        )
        if not self.contains_in_range(result) or not other.contains_in_range(result):
            return None
        return result
