from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, List, Optional, Sequence

from core.domain.enums import RoundingMode
from core.domain.identifiers import generate_id
from core.exceptions import ValidationError
from core.services.scheduling.calendar import parse_start_date
from core.services.scheduling.estimates import round_offset
from core.services.scheduling.models import CPMNode

logger = logging.getLogger(__name__)

EXPORT_LABEL = "pert-export"


@dataclass
class TodoItem:
    """A calendar-scheduled work item handed over to the todo list."""

    id: str
    title: str
    description: str
    scheduled_date: date
    due_date: date
    duration_days: int
    pert_project_id: str
    pert_task_id: str
    pert_project_name: str
    created_at: datetime
    updated_at: datetime
    completed: bool = False
    priority: str = "none"
    section: str = "work"
    labels: List[str] = field(default_factory=lambda: [EXPORT_LABEL])

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "scheduledDate": self.scheduled_date.isoformat(),
            "dueDate": self.due_date.isoformat(),
            "durationDays": self.duration_days,
            "priority": self.priority,
            "labels": list(self.labels),
            "section": self.section,
            "pertProjectId": self.pert_project_id,
            "pertTaskId": self.pert_task_id,
            "pertProjectName": self.pert_project_name,
            "createdAt": int(self.created_at.timestamp() * 1000),
            "updatedAt": int(self.updated_at.timestamp() * 1000),
        }


def export_to_todos(
    nodes: Sequence[CPMNode],
    project_id: str,
    project_name: str,
    start_date: date | datetime | str | None = None,
    *,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
    rounding: RoundingMode = RoundingMode.HALF_UP,
) -> List[TodoItem]:
    """
    Turn computed PERT nodes into independent todo items.

    One-way and one-shot: the items carry back-references to the project
    and task but stay unlinked afterwards. Without a start date the items
    are scheduled from ``today``.
    """
    if start_date is None or (isinstance(start_date, str) and not start_date.strip()):
        base = today or date.today()
    else:
        base = parse_start_date(start_date)
        if base is None:
            raise ValidationError(
                f"Invalid project start date {start_date!r}.",
                code="EXPORT_START_DATE_INVALID",
            )

    stamp = now or datetime.now(timezone.utc)
    items: List[TodoItem] = []
    for node in nodes:
        duration_days = round_offset(node.duration, rounding)
        items.append(
            TodoItem(
                id=generate_id(),
                title=node.name,
                description=(
                    f'PERT task from project "{project_name}" - Duration: {duration_days} days'
                ),
                scheduled_date=base + timedelta(days=round_offset(node.early_start, rounding)),
                due_date=base + timedelta(days=round_offset(node.early_finish, rounding)),
                duration_days=duration_days,
                pert_project_id=project_id,
                pert_task_id=node.id,
                pert_project_name=project_name,
                created_at=stamp,
                updated_at=stamp,
            )
        )

    logger.info("Exported %d PERT tasks from project %s to todos", len(items), project_id)
    return items


__all__ = ["TodoItem", "export_to_todos", "EXPORT_LABEL"]
