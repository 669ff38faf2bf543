from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from core.domain.enums import TimeUnit
from core.domain.identifiers import generate_task_key
from core.exceptions import ValidationError


def parse_dependency_ids(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """
    Normalize a dependency list.

    Accepts the comma-separated form typed into the task editor
    ("1, 2,,3") as well as any iterable of ids. Blank entries are dropped,
    surrounding whitespace is stripped and declaration order is kept.
    """
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw
    return tuple(str(p).strip() for p in parts if str(p).strip())


def _coerce_estimate(value: Any, field_name: str, task_id: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(
            f"Task {task_id}: '{field_name}' must be a number.",
            code="ESTIMATE_INVALID",
        )
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Task {task_id}: '{field_name}' must be a number, got {value!r}.",
            code="ESTIMATE_INVALID",
        ) from exc


@dataclass(frozen=True)
class PertTask:
    id: str
    name: str
    optimistic: float
    likely: float
    pessimistic: float
    dependencies: tuple[str, ...] = ()
    category: Optional[str] = None
    time_unit: TimeUnit = TimeUnit.DAYS

    @staticmethod
    def create(
        name: str = "New Task",
        optimistic: float = 1,
        likely: float = 2,
        pessimistic: float = 4,
        dependencies: str | Iterable[str] | None = None,
        **extra,
    ) -> "PertTask":
        return PertTask(
            id=generate_task_key(),
            name=name,
            optimistic=optimistic,
            likely=likely,
            pessimistic=pessimistic,
            dependencies=parse_dependency_ids(dependencies),
            **extra,
        )

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "PertTask":
        """Build a task from the JSON shape used by the planner front end."""
        task_id = str(data.get("id") or "").strip()
        if not task_id:
            raise ValidationError("Task id is required.", code="TASK_ID_MISSING")
        name = data.get("name")
        if name is None:
            raise ValidationError(f"Task {task_id}: name is required.", code="TASK_NAME_MISSING")

        raw_unit = data.get("timeUnit") or data.get("time_unit") or TimeUnit.DAYS.value
        try:
            time_unit = TimeUnit(raw_unit)
        except ValueError as exc:
            raise ValidationError(
                f"Task {task_id}: unknown time unit {raw_unit!r}.",
                code="TASK_TIME_UNIT_INVALID",
            ) from exc

        return PertTask(
            id=task_id,
            name=str(name),
            optimistic=_coerce_estimate(data.get("optimistic"), "optimistic", task_id),
            likely=_coerce_estimate(data.get("likely"), "likely", task_id),
            pessimistic=_coerce_estimate(data.get("pessimistic"), "pessimistic", task_id),
            dependencies=parse_dependency_ids(data.get("dependencies")),
            category=data.get("category") or None,
            time_unit=time_unit,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "optimistic": self.optimistic,
            "likely": self.likely,
            "pessimistic": self.pessimistic,
            "dependencies": list(self.dependencies),
            "timeUnit": self.time_unit.value,
        }
        if self.category is not None:
            data["category"] = self.category
        return data


__all__ = ["PertTask", "parse_dependency_ids"]
