import logging
import time
from pathlib import Path
from types import SimpleNamespace

import pytest

from flake.app.app_settings_manager import RunMode


@pytest.fixture(autouse=True)
def _isolate_logging(isolate_logging):
    """Close every handler after each test."""
    yield


@pytest.fixture
def module(tmp_log_dir, monkeypatch):
    """
    Import logging_setup and point default_log_dir at the temp directory.
    :param tmp_log_dir:
    :param monkeypatch:
    :return: logging_setup
    """
    from flake.app import logging_setup
    monkeypatch.setattr(logging_setup, "default_log_dir", lambda app_name: tmp_log_dir)
    return logging_setup


def _read_text(path: Path) -> str:
    """Retry briefly in case the listener thread is still writing."""
    for _ in range(10):
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            time.sleep(0.02)
    return path.read_text(encoding="utf-8", errors="replace")


def test_info_level_writes_file(module, tmp_log_dir):
    """test at INFO level"""
    logs = module.LogSystem.from_levels("flake", root_level=logging.INFO, console_level=logging.INFO)
    logger = logging.getLogger("flake.test")

    logger.debug("debug should NOT appear")
    logger.info("info should appear")
    logger.warning("warning should appear")
    logs.stop()

    log_file = tmp_log_dir / "flake.log"
    assert log_file.exists(), "log file was not created"
    assert logs.log_file == log_file

    text = _read_text(log_file)
    assert "info should appear" in text
    assert "warning should appear" in text
    assert "debug should NOT appear" not in text
    assert " INFO " in text or " WARNING " in text
    assert "flake.test" in text


def test_debug_level_outputs_debug(module, tmp_log_dir):
    """test at DEBUG level"""
    logs = module.LogSystem.from_levels("flake", root_level=logging.DEBUG, console_level=logging.DEBUG)
    logger = logging.getLogger("flake.polygon")

    logger.debug("debug visible")
    logger.info("info visible")
    logs.stop()

    text = _read_text(tmp_log_dir / "flake.log")
    assert "debug visible" in text
    assert "info visible" in text


def test_queue_listener_flush_on_stop(module, tmp_log_dir):
    logs = module.LogSystem.from_levels("flake", root_level=logging.INFO, console_level=logging.INFO)
    logger = logging.getLogger("flake.bulk")

    for i in range(200):
        logger.info("line %04d", i)

    logs.stop()

    text = _read_text(tmp_log_dir / "flake.log")
    assert "line 0000" in text
    assert "line 0199" in text
    assert "line 0200" not in text
    assert text.count("flake.bulk") == 200


def test_env_level_used_by_default_constructor(module, tmp_log_dir, monkeypatch):
    monkeypatch.setenv("FLAKE_LOG_LEVEL", "WARNING")
    logs = module.LogSystem("flake")
    assert logging.getLogger().level == logging.WARNING
    logs.stop()


def test_apply_logging_policy(module):
    logs = module.LogSystem.from_levels("flake", root_level=logging.INFO, console_level=logging.INFO)
    try:
        module.apply_logging_policy(logs, SimpleNamespace(run_mode=RunMode.PRODUCTION, logging_level="WARNING"))
        assert logging.getLogger().level == logging.DEBUG
        assert logs._console_handler.level == logging.WARNING

        module.apply_logging_policy(logs, SimpleNamespace(run_mode=RunMode.DEVELOPMENT, logging_level="ERROR"))
        assert logs._console_handler.level == logging.DEBUG
    finally:
        logs.stop()


