from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal

from core.domain.enums import RoundingMode
from core.domain.task import PertTask
from core.exceptions import ValidationError


_DECIMAL_ROUNDING = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def expected_duration(task: PertTask) -> float:
    """PERT weighted mean: (O + 4M + P) / 6. Inputs are not validated here."""
    return (task.optimistic + 4 * task.likely + task.pessimistic) / 6


def round_offset(value: float, mode: RoundingMode = RoundingMode.HALF_UP) -> int:
    """
    Round a fractional day offset to whole days.

    HALF_UP rounds halves away from zero (2.5 -> 3, -2.5 -> -3);
    HALF_EVEN rounds halves to the even neighbour (2.5 -> 2, 3.5 -> 4).
    """
    if not math.isfinite(value):
        raise ValidationError(f"Cannot round non-finite offset {value!r}.", code="OFFSET_INVALID")
    quantized = Decimal(repr(float(value))).quantize(Decimal("1"), rounding=_DECIMAL_ROUNDING[mode])
    return int(quantized)


def estimates_from_likely(likely: float, error_range_percent: float) -> tuple[int, float, int]:
    """
    Derive optimistic/pessimistic bounds around a most-likely estimate.

    Returns (optimistic, likely, pessimistic) where
    optimistic = max(1, round(likely * (1 - r))) and
    pessimistic = round(likely * (1 + r)), r = error_range_percent / 100.
    """
    if error_range_percent < 0 or not math.isfinite(error_range_percent):
        raise ValidationError(
            "Error range must be a non-negative percentage.",
            code="ESTIMATE_RANGE_INVALID",
        )
    if likely < 0 or not math.isfinite(likely):
        raise ValidationError(
            "Most likely estimate must be a non-negative number.",
            code="ESTIMATE_INVALID",
        )
    spread = error_range_percent / 100
    optimistic = max(1, round_offset(likely * (1 - spread)))
    pessimistic = round_offset(likely * (1 + spread))
    return optimistic, likely, pessimistic


def validate_estimates(task: PertTask) -> None:
    for field_name in ("optimistic", "likely", "pessimistic"):
        value = getattr(task, field_name)
        if not math.isfinite(value):
            raise ValidationError(
                f"Task {task.id}: '{field_name}' estimate must be finite.",
                code="ESTIMATE_INVALID",
            )
        if value < 0:
            raise ValidationError(
                f"Task {task.id}: '{field_name}' estimate cannot be negative.",
                code="ESTIMATE_INVALID",
            )


def estimates_out_of_order(task: PertTask) -> bool:
    return not (task.optimistic <= task.likely <= task.pessimistic)


__all__ = [
    "expected_duration",
    "round_offset",
    "estimates_from_likely",
    "validate_estimates",
    "estimates_out_of_order",
]
