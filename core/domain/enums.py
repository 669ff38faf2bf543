from __future__ import annotations

from enum import Enum


class TimeUnit(str, Enum):
    DAYS = "days"
    HOURS = "hours"


class RoundingMode(str, Enum):
    HALF_UP = "half_up"        # half away from zero
    HALF_EVEN = "half_even"    # banker's rounding


class WarningCode(str, Enum):
    DANGLING_DEPENDENCY = "DANGLING_DEPENDENCY"
    ESTIMATE_ORDER = "ESTIMATE_ORDER"


__all__ = ["TimeUnit", "RoundingMode", "WarningCode"]
