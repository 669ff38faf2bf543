from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from core.domain.enums import RoundingMode, TimeUnit, WarningCode
from core.domain.task import PertTask


@dataclass
class CPMNode:
    task: PertTask
    duration: float
    early_start: float
    early_finish: float
    late_start: float
    late_finish: float
    slack: float
    is_critical: bool

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def name(self) -> str:
        return self.task.name

    @property
    def dependencies(self) -> tuple[str, ...]:
        return self.task.dependencies

    @property
    def category(self) -> Optional[str]:
        return self.task.category

    @property
    def time_unit(self) -> TimeUnit:
        return self.task.time_unit

    def to_dict(self) -> dict[str, Any]:
        data = self.task.to_dict()
        data.update(
            {
                "duration": self.duration,
                "earlyStart": self.early_start,
                "earlyFinish": self.early_finish,
                "lateStart": self.late_start,
                "lateFinish": self.late_finish,
                "slack": self.slack,
                "isCritical": self.is_critical,
            }
        )
        return data


@dataclass(frozen=True)
class CalendarRange:
    start_date: date
    end_date: date

    def to_dict(self) -> dict[str, str]:
        return {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
        }


@dataclass(frozen=True)
class ScheduleWarning:
    code: WarningCode
    task_id: str
    message: str
    related_id: Optional[str] = None


@dataclass
class ScheduleResult:
    nodes: List[CPMNode]
    topo_order: List[str]
    project_duration: float
    warnings: List[ScheduleWarning] = field(default_factory=list)
    calendar: Dict[str, CalendarRange] = field(default_factory=dict)
    rounding: RoundingMode = RoundingMode.HALF_UP

    def by_id(self) -> Dict[str, CPMNode]:
        return {node.id: node for node in self.nodes}

    def get(self, task_id: str) -> Optional[CPMNode]:
        return self.by_id().get(task_id)

    def critical_ids(self) -> List[str]:
        return [node.id for node in self.nodes if node.is_critical]


__all__ = ["CPMNode", "CalendarRange", "ScheduleWarning", "ScheduleResult"]
