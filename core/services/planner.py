# core/services/planner.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional

from core.domain.task import PertTask
from core.services.export.todo_export import TodoItem, export_to_todos
from core.services.scheduling.engine import SchedulingEngine
from core.services.scheduling.models import ScheduleResult

logger = logging.getLogger(__name__)


class PlannerService:
    """
    Entry point for the planner front end.

    Takes the task payload as the editor (or the LLM-assisted task
    generator) produces it and hands back plain dictionaries ready to be
    rendered as a dependency diagram with dates and critical-path flags.
    """

    def __init__(self, engine: SchedulingEngine):
        self._engine: SchedulingEngine = engine

    def parse_tasks(self, payload: Iterable[Mapping[str, Any]]) -> List[PertTask]:
        return [PertTask.from_dict(item) for item in payload]

    def schedule(
        self,
        payload: Iterable[Mapping[str, Any]],
        start_date: date | datetime | str | None = None,
    ) -> ScheduleResult:
        return self._engine.compute(self.parse_tasks(payload), start_date=start_date)

    def schedule_as_dict(
        self,
        payload: Iterable[Mapping[str, Any]],
        start_date: date | datetime | str | None = None,
    ) -> dict[str, Any]:
        result = self.schedule(payload, start_date=start_date)
        return {
            "nodes": [node.to_dict() for node in result.nodes],
            "projectDuration": result.project_duration,
            "criticalIds": result.critical_ids(),
            "calendar": {task_id: rng.to_dict() for task_id, rng in result.calendar.items()},
            "warnings": [
                {
                    "code": w.code.value,
                    "taskId": w.task_id,
                    "relatedId": w.related_id,
                    "message": w.message,
                }
                for w in result.warnings
            ],
        }

    def export_todos(
        self,
        payload: Iterable[Mapping[str, Any]],
        project_id: str,
        project_name: str,
        start_date: date | datetime | str | None = None,
        today: Optional[date] = None,
    ) -> List[TodoItem]:
        result = self.schedule(payload)
        logger.info("Exporting project %s (%d tasks) to todos", project_id, len(result.nodes))
        return export_to_todos(
            result.nodes,
            project_id=project_id,
            project_name=project_name,
            start_date=start_date,
            today=today,
            rounding=self._engine.settings.rounding,
        )


__all__ = ["PlannerService"]
