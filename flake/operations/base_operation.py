"""
Base class for operations.

Generic operation interface that doesn't depend on any UI toolkit.
Operations act on a Polygon and report changes through a callback.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable

from flake.core.polygon import Polygon


logger = logging.getLogger(__name__)

ChangedCallback = Callable[[Polygon], None]


class BaseOperation(ABC):
    """
    Base class for all operations.

    Notes:
        - It does not depend on a renderer or input toolkit.
        - Subclasses are responsible for:
            * calling `_notify_changed()` after the polygon state moved.
            * managing `is_active` in their lifecycle (start/reset/etc).
    """

    def __init__(self, polygon: Polygon, on_changed: ChangedCallback | None = None):
        """Initialize the operation."""
        self.polygon = polygon
        self.on_changed = on_changed
        self.is_active: bool = False
        self._operation_name: str = self.__class__.__name__

    # =====================================================
    # Lifecycle interface
    # =====================================================

    @abstractmethod
    def start(self) -> None:
        """
        Start the operation.

        Typically, subclasses should set `self.is_active = True` here.
        """
        raise NotImplementedError

    @abstractmethod
    def apply(self) -> None:
        """Apply the operation to the polygon."""
        raise NotImplementedError

    @abstractmethod
    def cancel(self) -> None:
        """Drop any pending input without touching the polygon."""
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """
        Reset the operation to its initial state.

        Typically, subclasses should set `self.is_active = False` here.
        """
        raise NotImplementedError

    # =====================================================
    # Common helpers
    # =====================================================

    def is_operation_active(self) -> bool:
        """
        Check if the operation is currently active.

        :return: True if the operation is active, False otherwise.
        """
        return self.is_active

    def _notify_changed(self) -> None:
        if self.on_changed is None:
            return
        logger.debug("[%s] Notifying polygon change.", self._operation_name)
        self.on_changed(self.polygon)
