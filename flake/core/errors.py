from __future__ import annotations


class CutError(ValueError):
    """Base class for a cut that cannot be applied. The polygon is left untouched."""


class InsufficientPointsError(CutError):
    """Raised when a cut has fewer than two points."""

    def __init__(self, count: int) -> None:
        super().__init__(f"A cut needs at least 2 points, got {count}")
        self.count = count


class NoIntersectionError(CutError):
    """Raised when one end of the cut does not cross the polygon boundary."""

    def __init__(self, end: str) -> None:
        super().__init__(f"The {end} end of the cut does not cross the polygon boundary")
        self.end = end


class DegenerateResultError(CutError):
    """Raised when the spliced polygon would be invalid."""
