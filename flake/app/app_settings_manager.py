from __future__ import annotations
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict
from PySide6.QtCore import QSettings
import logging

logger = logging.getLogger(__name__)


class RunMode(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    VERBOSE = "verbose"

    def __str__(self):
        return self.value

    def __repr__(self):
        return self.value


# ----------------------
# Defaults
# ----------------------
DEFAULTS: Dict[str, Any] = {
    "general": {
        "run_mode": RunMode.PRODUCTION.value,
        "logging_level": "INFO",  # "DEBUG", "INFO", "WARNING", "ERROR"
    },
    "flake": {
        "sections": 12,
        "wedge_angle_deg": 30.0,
        "wedge_height_ratio": 0.9,
        "history_limit": 0,  # 0 = unlimited
    },
}

SECTIONS = ("general", "flake")


# ---------------------
# Data model
# ---------------------
@dataclass
class GeneralConfig:
    run_mode: RunMode = RunMode.PRODUCTION
    logging_level: str = "INFO"


@dataclass
class FlakeConfig:
    sections: int = 12
    wedge_angle_deg: float = 30.0
    wedge_height_ratio: float = 0.9
    history_limit: int = 0


@dataclass
class AppSettingsData:
    general: GeneralConfig = field(default_factory=GeneralConfig)
    flake: FlakeConfig = field(default_factory=FlakeConfig)


# ----------------------
# Validators
# ----------------------
def _validate_run_mode(v: Any) -> RunMode:
    if isinstance(v, RunMode):
        return v
    mode = str(v).strip().lower()
    try:
        return RunMode(mode)
    except ValueError:
        return RunMode(DEFAULTS["general"]["run_mode"])


def _validate_logging_level(v: str) -> str:
    v = str(v).strip().upper()
    return v if v in ("DEBUG", "INFO", "WARNING", "ERROR") else DEFAULTS["general"]["logging_level"]


def _validate_sections(v: Any) -> int:
    default = DEFAULTS["flake"]["sections"]
    try:
        n = int(v)
    except (TypeError, ValueError):
        return default
    return n if (2 <= n <= 64 and n % 2 == 0) else default


def _validate_wedge_angle(v: Any) -> float:
    default = DEFAULTS["flake"]["wedge_angle_deg"]
    try:
        f = float(v)
    except (TypeError, ValueError):
        return default
    return f if (0 < f < 180) else default


def _validate_height_ratio(v: Any) -> float:
    default = DEFAULTS["flake"]["wedge_height_ratio"]
    try:
        f = float(v)
    except (TypeError, ValueError):
        return default
    return f if (0 < f <= 1) else default


def _validate_history_limit(v: Any) -> int:
    default = DEFAULTS["flake"]["history_limit"]
    try:
        n = int(v)
    except (TypeError, ValueError):
        return default
    return n if n >= 0 else default


# ---------------------
# AppSettingsManager
# ---------------------
class AppSettingsManager:
    """
    Application settings.
    DEFAULTS in code are the base, QSettings values override them.
    Values are validated on load; out-of-range values fall back to defaults.
    set_* methods save to QSettings immediately.
    """
    def __init__(self, org_domain: str = "flake.org", app_name: str = "Flake"):
        self._settings = QSettings(org_domain, app_name)
        self._data = self._load_effective()

    # Read
    @property
    def data(self) -> AppSettingsData:
        return self._data

    @property
    def run_mode(self) -> RunMode:
        return self._data.general.run_mode

    @property
    def logging_level(self) -> str:
        return self._data.general.logging_level

    @property
    def sections(self) -> int:
        return self._data.flake.sections

    @property
    def wedge_angle_deg(self) -> float:
        return self._data.flake.wedge_angle_deg

    @property
    def wedge_height_ratio(self) -> float:
        return self._data.flake.wedge_height_ratio

    @property
    def history_limit(self) -> int | None:
        """Maximum number of kept snapshots, None when unlimited."""
        return self._data.flake.history_limit or None

    # Write
    def set_run_mode(self, v: str | RunMode) -> None:
        mode = _validate_run_mode(v)
        self._settings.setValue("general/run_mode", mode.value)
        self._data.general.run_mode = mode

    def set_logging_level(self, v: str) -> None:
        level = _validate_logging_level(v)
        self._settings.setValue("general/logging_level", level)
        self._data.general.logging_level = level

    def set_sections(self, v: int) -> None:
        n = _validate_sections(v)
        self._settings.setValue("flake/sections", n)
        self._data.flake.sections = n

    def set_wedge_angle_deg(self, v: float) -> None:
        f = _validate_wedge_angle(v)
        self._settings.setValue("flake/wedge_angle_deg", f)
        self._data.flake.wedge_angle_deg = f

    def set_wedge_height_ratio(self, v: float) -> None:
        f = _validate_height_ratio(v)
        self._settings.setValue("flake/wedge_height_ratio", f)
        self._data.flake.wedge_height_ratio = f

    def set_history_limit(self, v: int) -> None:
        n = _validate_history_limit(v)
        self._settings.setValue("flake/history_limit", n)
        self._data.flake.history_limit = n

    # Reset
    def reset_all_to_default(self) -> None:
        """Remove every user setting."""
        for section in SECTIONS:
            self._settings.remove(section)
        self._data = self._load_effective()

    def reset_section(self, section: str) -> None:
        """Restore one section to its defaults."""
        if section not in SECTIONS:
            raise ValueError(f"Invalid section: {section}")
        self._settings.remove(section)
        self._data = self._load_effective()

    def to_dict(self) -> dict[str, Any]:
        data = {
            "general": asdict(self._data.general),
            "flake": asdict(self._data.flake),
        }
        data["general"]["run_mode"] = self._data.general.run_mode.value
        return data

    # ---------- internal ---------------
    def _load_effective(self) -> AppSettingsData:
        """Start from DEFAULTS, apply QSettings overrides, validate, build the model."""
        merged = self._apply_qsettings_overrides(DEFAULTS)
        logger.debug("effective settings: %s", merged)
        return self._make_model_from(merged)

    def _apply_qsettings_overrides(self, base: dict[str, Any]) -> dict[str, Any]:
        """
        Read the dict based settings and apply QSettings overrides.
        :param base:
        :return: apply QSettings overrides
        """
        # general
        g = dict(base.get("general", {}))
        v = self._settings.value("general/run_mode", None)
        if v is not None:
            g["run_mode"] = _validate_run_mode(v).value
        v = self._settings.value("general/logging_level", None)
        if v is not None:
            g["logging_level"] = _validate_logging_level(v)

        # flake
        fl = dict(base.get("flake", {}))
        for key, validate in (
                ("sections", _validate_sections),
                ("wedge_angle_deg", _validate_wedge_angle),
                ("wedge_height_ratio", _validate_height_ratio),
                ("history_limit", _validate_history_limit),
        ):
            v = self._settings.value(f"flake/{key}", None)
            if v is not None:
                fl[key] = validate(v)

        return {"general": g, "flake": fl}

    def _make_model_from(self, merged: dict[str, Any]) -> AppSettingsData:
        """
        making model from merged dict and returning merged AppSettingsData
        :param merged:
        :return: merged AppSettingsData
        """
        g = merged.get("general", {})
        fl = merged.get("flake", {})
        d = DEFAULTS["flake"]
        return AppSettingsData(
            general=GeneralConfig(
                run_mode=_validate_run_mode(g.get("run_mode", DEFAULTS["general"]["run_mode"])),
                logging_level=_validate_logging_level(g.get("logging_level", DEFAULTS["general"]["logging_level"])),
            ),
            flake=FlakeConfig(
                sections=_validate_sections(fl.get("sections", d["sections"])),
                wedge_angle_deg=_validate_wedge_angle(fl.get("wedge_angle_deg", d["wedge_angle_deg"])),
                wedge_height_ratio=_validate_height_ratio(fl.get("wedge_height_ratio", d["wedge_height_ratio"])),
                history_limit=_validate_history_limit(fl.get("history_limit", d["history_limit"])),
            ),
        )
