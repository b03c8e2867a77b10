"""
Cut operation: turns presses on the drawing surface into cuts on the polygon.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from flake.core.cut_collector import CutCollector
from flake.core.errors import CutError
from flake.core.geometry import Point, as_point
from flake.core.polygon import Polygon
from flake.operations.base_operation import BaseOperation, ChangedCallback
from flake.utils.log_util import log_io

logger = logging.getLogger(__name__)


class PressOutcome(str, Enum):
    IGNORED = "ignored"
    STARTED = "started"
    MARKED = "marked"
    CUT = "cut"
    REJECTED = "rejected"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class PressResult:
    outcome: PressOutcome
    point: Point
    error: CutError | None = None


class CutOperation(BaseOperation):
    """
    Collects cut points from presses and applies finished cuts.

    Press rules:
    - Outside the polygon with no finishable cut: a new cut starts at the press.
    - Inside the polygon: the press is added to a started cut, ignored otherwise.
    - Outside the polygon with a finishable cut: the press ends the cut and it
      is applied. A new, empty cut follows whether or not the cut succeeded.

    Attributes:
        collector: The in-progress cut.
        cut_log: Snips of every applied cut, oldest first.
    """

    def __init__(self, polygon: Polygon, on_changed: ChangedCallback | None = None):
        super().__init__(polygon, on_changed)
        self.collector = CutCollector()
        self.cut_log: list[list[Point]] = []
        logger.debug("[CutOperation] Initialized.")

    # =====================================================
    # Lifecycle methods (BaseOperation interface)
    # =====================================================

    def start(self) -> None:
        logger.info("[CutOperation] Starting operation.")
        self.reset()
        self.is_active = True

    @log_io(level=logging.DEBUG)
    def apply(self) -> None:
        """
        Apply the collected cut to the polygon.

        :raises CutError: the polygon rejected the cut. The polygon is unchanged.
        """
        if not self.collector.can_finish():
            logger.warning("[CutOperation] Cut has %d point(s), nothing to apply.", len(self.collector))
            return

        snips = self.collector.snips()
        self.polygon.cut(snips)
        self.cut_log.append(snips)
        logger.info("[CutOperation] Cut %d applied with %d points.", len(self.cut_log), len(snips))
        self._notify_changed()

    def cancel(self) -> None:
        logger.info("[CutOperation] Cancelling in-progress cut.")
        self.collector = CutCollector()

    def reset(self) -> None:
        self.collector = CutCollector()
        self.is_active = False

    # =====================================================
    # Input
    # =====================================================

    def press(self, point: Point) -> PressResult:
        """
        Handle a press at a point in the polygon's view frame.

        :param point: Press location
        :return: PressResult describing what happened
        """
        point = as_point(point)
        if not self.is_active:
            return PressResult(PressOutcome.IGNORED, point)

        if self.polygon.contains(point):
            if not self.collector.is_started():
                return PressResult(PressOutcome.IGNORED, point)
            self.collector.add(point)
            return PressResult(PressOutcome.MARKED, point)

        if not self.collector.can_finish():
            self.collector = CutCollector()
            self.collector.add(point)
            return PressResult(PressOutcome.STARTED, point)

        self.collector.add(point)
        try:
            self.apply()
        except CutError as e:
            logger.warning("[CutOperation] Cut rejected: %s", e)
            return PressResult(PressOutcome.REJECTED, point, error=e)
        finally:
            self.collector = CutCollector()
        return PressResult(PressOutcome.CUT, point)

    # =====================================================
    # History
    # =====================================================

    def undo(self) -> bool:
        moved = self.polygon.undo()
        if moved:
            self._notify_changed()
        return moved

    def redo(self) -> bool:
        moved = self.polygon.redo()
        if moved:
            self._notify_changed()
        return moved
