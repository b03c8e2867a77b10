import logging
from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from flake.core.geometry import Point


@pytest.fixture
def square_points() -> list[Point]:
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


@pytest.fixture
def tmp_settings(tmp_path: Path):
    """Point QSettings at an INI file in a temp folder so tests never share state."""
    QSettings.setDefaultFormat(QSettings.IniFormat)
    QSettings.setPath(QSettings.IniFormat, QSettings.UserScope, str(tmp_path))
    s = QSettings("flake.org", "Flake")
    s.clear()
    yield s
    s.clear()


@pytest.fixture
def isolate_logging():
    """Reset the root logger after the test."""
    yield
    logging.shutdown()
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)


@pytest.fixture
def tmp_log_dir(tmp_path: Path) -> Path:
    d = tmp_path / "logs"
    d.mkdir(parents=True, exist_ok=True)
    return d

