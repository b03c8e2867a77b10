from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from flake.core.geometry import Point, as_point


@dataclass(frozen=True)
class PolygonState:
    """
    Immutable snapshot of a polygon's vertex list.

    Key points:
    - Vertices are stored in the base frame (the frame the polygon was built in).
    - Translation and reflection live in ViewTransform, never here,
      so undo/redo does not revert a transform.
    """
    vertices: tuple[Point, ...]

    @staticmethod
    def from_points(points: Iterable[Point]) -> PolygonState:
        return PolygonState(vertices=tuple(as_point(p) for p in points))

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class ViewTransform:
    """
    Maps base-frame points to the view frame.

    x' = x + dx
    y' = (2 * axis_y - y if flipped else y) + dy

    where axis_y is the base-frame pivot's y coordinate.
    """
    dx: float = 0.0
    dy: float = 0.0
    flipped: bool = False

    def translated(self, dx: float, dy: float) -> ViewTransform:
        return replace(self, dx=self.dx + dx, dy=self.dy + dy)

    def reflected(self) -> ViewTransform:
        return replace(self, flipped=not self.flipped)

    def apply(self, point: Point, axis_y: float) -> Point:
        y = 2 * axis_y - point.y if self.flipped else point.y
        return Point(point.x + self.dx, y + self.dy)

    def invert(self, point: Point, axis_y: float) -> Point:
        y = point.y - self.dy
        if self.flipped:
            y = 2 * axis_y - y
        return Point(point.x - self.dx, y)
