"""The starting paper: one folded wedge of the snowflake."""
from __future__ import annotations

import math
from dataclasses import dataclass

from flake.core.geometry import Point
from flake.core.polygon import Polygon


@dataclass(frozen=True)
class WedgeDimensions:
    """Length from apex to base, and base width."""
    length: float
    base: float


class Wedge(Polygon):
    """
    Isosceles triangle with its apex at (x, y), opening towards +x.

    The apex is the pivot, so reflecting the wedge mirrors it about the fold
    line through the apex.

    :param x: Apex x
    :param y: Apex y
    :param height: Distance from the apex to the base
    :param angle: Apex angle in radians, 0 < angle < pi
    """

    def __init__(
            self,
            x: float,
            y: float,
            height: float,
            angle: float,
            max_snapshots: int | None = None,
    ) -> None:
        if height <= 0:
            raise ValueError(f"height must be positive, got {height}")
        if not 0 < angle < math.pi:
            raise ValueError(f"angle must be in (0, pi), got {angle}")

        base = 2 * (math.tan(angle / 2) * height)
        self._dimensions = WedgeDimensions(length=height, base=base)
        super().__init__(
            [Point(x, y), Point(height + x, base * 0.5 + y), Point(height + x, -base * 0.5 + y)],
            pivot=Point(x, y),
            max_snapshots=max_snapshots,
        )

    @property
    def dimensions(self) -> WedgeDimensions:
        return self._dimensions
