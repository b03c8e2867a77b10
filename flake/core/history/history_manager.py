from __future__ import annotations

import logging
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HistoryManager(Generic[T]):
    """
    Generic undo/redo history over immutable snapshots (Qt-independent).

    Design notes:
    - Snapshots are kept in a list, the cursor is an index into it.
    - `push` always discards the snapshots after the cursor, so cutting after
      an undo loses the old redo branch.
    - With `max_snapshots` set, the oldest snapshots are dropped and the
      oldest remaining one becomes the root.
    """

    def __init__(self, root: T, max_snapshots: int | None = None) -> None:
        if max_snapshots is not None and max_snapshots < 1:
            raise ValueError(f"max_snapshots must be >= 1, got {max_snapshots}")
        self._max_snapshots = max_snapshots
        self._snapshots: list[T] = [root]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def current(self) -> T:
        return self._snapshots[self._cursor]

    def can_undo(self) -> bool:
        """Return True if undo is possible."""
        return self._cursor > 0

    def can_redo(self) -> bool:
        """Return True if redo is possible."""
        return self._cursor < len(self._snapshots) - 1

    def push(self, snapshot: T) -> None:
        """
        Append a snapshot after the cursor and move the cursor to it.

        Rules:
        - Always discards the redo tail.
        - Trims the oldest snapshots to max_snapshots.
        """
        dropped = len(self._snapshots) - 1 - self._cursor
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(snapshot)
        if self._max_snapshots is not None and len(self._snapshots) > self._max_snapshots:
            del self._snapshots[: len(self._snapshots) - self._max_snapshots]
        self._cursor = len(self._snapshots) - 1
        logger.debug("push: cursor=%d size=%d dropped_redo=%d", self._cursor, len(self._snapshots), dropped)

    def undo(self) -> T | None:
        logger.debug("undo: cursor=%d", self._cursor)
        if not self.can_undo():
            return None
        self._cursor -= 1
        return self.current

    def redo(self) -> T | None:
        logger.debug("redo: cursor=%d size=%d", self._cursor, len(self._snapshots))
        if not self.can_redo():
            return None
        self._cursor += 1
        return self.current
