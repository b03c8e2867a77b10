"""
Polygon - the folded paper being cut.

Design:
- The active vertex list is the history cursor's PolygonState. Nothing else
  holds vertices, and boundary segments are derived on demand.
- Snapshots live in the base frame. translate / reflect_through_pivot only
  change the ViewTransform, so undo/redo never reverts them.
- A cut is computed on copies and committed only after validation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from flake.core.errors import (
    DegenerateResultError,
    InsufficientPointsError,
    NoIntersectionError,
)
from flake.core.geometry import Point, Segment, as_point, point_in_polygon, squared_distance
from flake.core.history.history_manager import HistoryManager
from flake.core.states.polygon_state import PolygonState, ViewTransform
from flake.utils.log_util import log_io

logger = logging.getLogger(__name__)

MIN_VERTICES = 3
# Squared distance under which two consecutive vertices count as the same point.
COINCIDENT_EPS_SQ = 1e-18


@dataclass(frozen=True)
class BoundaryCrossing:
    """Where a segment crosses the boundary: the edge index and the crossing point."""
    edge_index: int
    point: Point


def _segments_from_points(pts: Sequence[Point]) -> list[Segment]:
    """Closed ring of segments, the last one joins the final vertex back to the first."""
    return [Segment(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))]


def _has_coincident_neighbours(pts: Sequence[Point]) -> bool:
    n = len(pts)
    return any(squared_distance(pts[i], pts[(i + 1) % n]) <= COINCIDENT_EPS_SQ for i in range(n))


def _first_crossing(boundary: Sequence[Segment], segment: Segment) -> BoundaryCrossing | None:
    for i, edge in enumerate(boundary):
        point = segment.intersect(edge)
        if point is not None:
            return BoundaryCrossing(edge_index=i, point=point)
    return None


class Polygon:
    """
    Closed polygon with a pivot, view transforms and a cut history.

    Usage:
    >>> square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    >>> square.cut([(-5, 5), (5, 5), (15, 5)])
    >>> square.undo()
    True
    """

    def __init__(
            self,
            vertices: Iterable[Point],
            pivot: Point | None = None,
            max_snapshots: int | None = None,
    ) -> None:
        root = PolygonState.from_points(vertices)
        if len(root) < MIN_VERTICES:
            raise ValueError(f"A polygon needs at least {MIN_VERTICES} vertices, got {len(root)}")
        if _has_coincident_neighbours(root.vertices):
            raise ValueError("A polygon cannot have coincident consecutive vertices")

        self._pivot0 = as_point(pivot) if pivot is not None else root.vertices[0]
        self._transform = ViewTransform()
        self._history: HistoryManager[PolygonState] = HistoryManager(root, max_snapshots=max_snapshots)
        logger.debug("polygon created with %d vertices, pivot=%s", len(root), self._pivot0)

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vertices={self.vertex_count}, pivot={self.pivot})"

    # ----------------------------------------------------
    # Queries
    @property
    def vertex_count(self) -> int:
        return len(self._history.current)

    @property
    def pivot(self) -> Point:
        """Pivot in the view frame."""
        return self._transform.apply(self._pivot0, self._pivot0.y)

    @property
    def transform(self) -> ViewTransform:
        return self._transform

    def current_vertices(self) -> list[Point]:
        """Return a copy of the active vertex list in the view frame."""
        return [self._to_view(p) for p in self._history.current.vertices]

    def boundary_segments(self) -> list[Segment]:
        """Boundary edges in the view frame. Edge i runs from vertex i to vertex i + 1."""
        return _segments_from_points(self.current_vertices())

    def find_boundary_crossing(self, segment: Segment) -> BoundaryCrossing | None:
        """
        Find the first boundary edge, in vertex order, crossed by segment.

        :param segment: Segment in the view frame
        :return: BoundaryCrossing in the view frame, or None
        """
        return _first_crossing(self.boundary_segments(), segment)

    def contains(self, point: Point) -> bool:
        """Check whether a view-frame point lies inside the polygon."""
        return point_in_polygon(as_point(point), self.current_vertices())

    # ----------------------------------------------------
    # Transforms
    def translate(self, dx: float, dy: float) -> None:
        """Move every vertex and the pivot. Not recorded in the history."""
        self._transform = self._transform.translated(dx, dy)

    def reflect_through_pivot(self) -> None:
        """Mirror every vertex about the horizontal line through the pivot (y' = 2 * pivot.y - y)."""
        self._transform = self._transform.reflected()

    # ----------------------------------------------------
    # Cutting
    @log_io(level=logging.DEBUG)
    def cut(self, cut_points: Sequence[Point]) -> None:
        """
        Splice a cut into the boundary.

        The first and last segments of the cut must each cross the boundary.
        The cut's end points are moved onto the boundary, and the boundary
        vertices between the two crossings are replaced by the cut points.

        :param cut_points: Cut polyline in the view frame. It is not modified.
        :raises InsufficientPointsError: fewer than two points
        :raises NoIntersectionError: an end of the cut misses the boundary
        :raises DegenerateResultError: the result would be an invalid polygon
        """
        if len(cut_points) < 2:
            raise InsufficientPointsError(len(cut_points))

        axis_y = self._pivot0.y
        cuts = [self._transform.invert(as_point(p), axis_y) for p in cut_points]
        points = list(self._history.current.vertices)
        boundary = _segments_from_points(points)

        int1 = _first_crossing(boundary, Segment(cuts[0], cuts[1]))
        if int1 is None:
            raise NoIntersectionError("first")
        int2 = _first_crossing(boundary, Segment(cuts[-2], cuts[-1]))
        if int2 is None:
            raise NoIntersectionError("last")
        logger.debug("cut crosses edges %d and %d", int1.edge_index, int2.edge_index)

        splice_start = min(int1.edge_index, int2.edge_index) + 1
        splice_length = abs(int1.edge_index - int2.edge_index)

        cuts[0] = int1.point
        cuts[-1] = int2.point

        if int2.edge_index < int1.edge_index:
            cuts.reverse()

        if int1.edge_index == int2.edge_index:
            # Both ends on one edge: insert starting from the side nearest the edge start.
            edge_start = points[int1.edge_index]
            if squared_distance(cuts[0], edge_start) > squared_distance(cuts[-1], edge_start):
                cuts.reverse()

        points[splice_start:splice_start + splice_length] = cuts

        # span <= n - 1 and len(cuts) >= 2, so the ring keeps at least 3 vertices.
        if _has_coincident_neighbours(points):
            raise DegenerateResultError("Cut would create a zero-length boundary edge")

        self._history.push(PolygonState(vertices=tuple(points)))
        logger.info("cut applied: %d -> %d vertices", len(boundary), len(points))

    # ----------------------------------------------------
    # History
    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def undo(self) -> bool:
        """Step back to the previous snapshot. Returns False when there is none."""
        return self._history.undo() is not None

    def redo(self) -> bool:
        """Step forward to the next snapshot. Returns False when there is none."""
        return self._history.redo() is not None

    # ----------------------------------------------------
    # internal
    def _to_view(self, point: Point) -> Point:
        return self._transform.apply(point, self._pivot0.y)
