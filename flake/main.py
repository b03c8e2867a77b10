# NOTE:
# Start the LogSystem before building any polygon so that construction
#  and the first cuts are logged.

import logging
import math
from dataclasses import dataclass

import numpy as np

from flake.app.app_settings_manager import AppSettingsManager
from flake.app.logging_setup import LogSystem, apply_logging_policy
from flake.core.unfold import unfold_sections
from flake.core.wedge import Wedge
from flake.operations.base_operation import ChangedCallback
from flake.operations.cut.cut_operation import CutOperation

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a front end needs to drive one cutting session."""
    logs: LogSystem
    settings: AppSettingsManager
    wedge: Wedge
    operation: CutOperation

    def unfolded(self) -> list[np.ndarray]:
        """Sections of the unfolded flake for the preview renderer."""
        return unfold_sections(self.wedge, self.settings.sections)

    def stop(self) -> None:
        logger.info("App exit")
        self.logs.stop()


def create_folded_wedge(settings: AppSettingsManager, width: float, height: float) -> Wedge:
    """
    Build the starting wedge and center it on a width x height surface.

    The wedge length is wedge_height_ratio * width, its apex angle is wedge_angle_deg.
    """
    wedge = Wedge(
        0.0, 0.0,
        width * settings.wedge_height_ratio,
        math.radians(settings.wedge_angle_deg),
        max_snapshots=settings.history_limit,
    )
    folded_x = (width - wedge.dimensions.length) / 2
    folded_y = height / 2
    wedge.translate(folded_x, folded_y)
    logger.debug("wedge placed at (%.1f, %.1f): %s", folded_x, folded_y, wedge.dimensions)
    return wedge


def start(
        width: float = 600.0,
        height: float = 600.0,
        settings: AppSettingsManager | None = None,
        on_changed: ChangedCallback | None = None,
        app_name: str = "flake",
) -> AppContext:
    """
    Start logging, load settings and open a cutting session on a fresh wedge.

    Call AppContext.stop() on exit to flush the log file.
    """
    logs = LogSystem(app_name)
    logger.info("App start")
    settings = settings or AppSettingsManager()
    apply_logging_policy(logs, settings)

    wedge = create_folded_wedge(settings, width, height)
    operation = CutOperation(wedge, on_changed=on_changed)
    operation.start()
    return AppContext(logs=logs, settings=settings, wedge=wedge, operation=operation)
