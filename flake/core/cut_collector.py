from __future__ import annotations

import logging

from flake.core.geometry import Point, as_point

logger = logging.getLogger(__name__)


class CutCollector:
    """
    Collects the points of one in-progress cut.

    A collector is append-only. Abandon a cut by replacing the collector.
    """

    def __init__(self) -> None:
        self._snips: list[Point] = []

    def __len__(self) -> int:
        return len(self._snips)

    def add(self, point: Point) -> None:
        """Append a point to the cut."""
        point = as_point(point)
        self._snips.append(point)
        logger.debug("snip %d: %s", len(self._snips), point)

    def is_started(self) -> bool:
        return bool(self._snips)

    def can_finish(self) -> bool:
        return len(self._snips) > 1

    def snips(self) -> list[Point]:
        """Return a copy of the collected points in insertion order."""
        return list(self._snips)

    def last(self) -> Point | None:
        return self._snips[-1] if self._snips else None
