"""Core components layer - geometry, polygon cutting and history, toolkit-independent."""

from flake.core.cut_collector import CutCollector
from flake.core.errors import (
    CutError,
    DegenerateResultError,
    InsufficientPointsError,
    NoIntersectionError,
)
from flake.core.geometry import Point, Segment, as_point
from flake.core.polygon import BoundaryCrossing, Polygon
from flake.core.wedge import Wedge, WedgeDimensions

__all__ = [
    "BoundaryCrossing",
    "CutCollector",
    "CutError",
    "DegenerateResultError",
    "InsufficientPointsError",
    "NoIntersectionError",
    "Point",
    "Polygon",
    "Segment",
    "Wedge",
    "WedgeDimensions",
    "as_point",
]
