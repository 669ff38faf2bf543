from __future__ import annotations

import os

from core.domain.enums import RoundingMode
from core.exceptions import ValidationError
from core.services.scheduling.settings import DEFAULT_CRITICAL_TOLERANCE, ScheduleSettings

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValidationError(f"{name} must be a boolean flag, got {raw!r}.", code="SETTINGS_INVALID")


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be a number, got {raw!r}.", code="SETTINGS_INVALID") from exc


def _env_rounding(name: str, default: RoundingMode) -> RoundingMode:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    try:
        return RoundingMode(raw)
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in RoundingMode)
        raise ValidationError(
            f"{name} must be one of {choices}, got {raw!r}.", code="SETTINGS_INVALID"
        ) from exc


def load_schedule_settings() -> ScheduleSettings:
    """Build engine settings from PM_* environment variables."""
    return ScheduleSettings(
        critical_tolerance=_env_float("PM_CRITICAL_TOLERANCE", DEFAULT_CRITICAL_TOLERANCE),
        rounding=_env_rounding("PM_DATE_ROUNDING", RoundingMode.HALF_UP),
        validate_estimates=_env_flag("PM_VALIDATE_ESTIMATES", True),
        strict_estimate_order=_env_flag("PM_STRICT_ESTIMATE_ORDER", False),
    )


__all__ = ["load_schedule_settings"]
