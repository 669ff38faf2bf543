from __future__ import annotations

from dataclasses import dataclass

from core.domain.enums import RoundingMode
from core.exceptions import ValidationError


DEFAULT_CRITICAL_TOLERANCE = 0.01


@dataclass(frozen=True)
class ScheduleSettings:
    """
    Knobs for a single CPM computation.

    - critical_tolerance: |slack| below this marks a task critical
    - rounding: how fractional day offsets map onto calendar days
    - validate_estimates: reject negative / non-finite estimates
    - strict_estimate_order: reject estimates not ordered O <= M <= P
      (otherwise they are reported as warnings)
    """

    critical_tolerance: float = DEFAULT_CRITICAL_TOLERANCE
    rounding: RoundingMode = RoundingMode.HALF_UP
    validate_estimates: bool = True
    strict_estimate_order: bool = False

    def __post_init__(self) -> None:
        if not self.critical_tolerance > 0:
            raise ValidationError(
                "Critical tolerance must be a positive number.",
                code="SETTINGS_INVALID",
            )


__all__ = ["ScheduleSettings", "DEFAULT_CRITICAL_TOLERANCE"]
