# core/services/scheduling/engine.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from core.domain.enums import WarningCode
from core.domain.task import PertTask
from core.exceptions import ValidationError
from core.services.scheduling.calendar import project_dates
from core.services.scheduling.estimates import (
    estimates_out_of_order,
    expected_duration,
    validate_estimates,
)
from core.services.scheduling.graph import (
    build_successor_index,
    find_dangling_dependencies,
    index_tasks,
    topological_sort,
)
from core.services.scheduling.models import CPMNode, ScheduleResult, ScheduleWarning
from core.services.scheduling.passes import run_backward_pass, run_forward_pass
from core.services.scheduling.results import build_schedule_nodes
from core.services.scheduling.settings import ScheduleSettings

logger = logging.getLogger(__name__)


class SchedulingEngine:
    """
    PERT/CPM scheduling engine:
    - Expected duration per task: (O + 4M + P) / 6
    - Forward pass: ES/EF in topological order
    - Backward pass: LS/LF in reverse topological order
    - Slack = LS - ES, critical when |slack| < tolerance
    - Optional projection of ES/EF offsets onto calendar dates

    The engine keeps no state between calls; every working map is local to
    a single computation.
    """

    def __init__(self, settings: Optional[ScheduleSettings] = None):
        self._settings: ScheduleSettings = settings or ScheduleSettings()

    @property
    def settings(self) -> ScheduleSettings:
        return self._settings

    def compute(
        self,
        tasks: Sequence[PertTask],
        start_date: date | datetime | str | None = None,
    ) -> ScheduleResult:
        """
        Full CPM calculation for a task list:
        - rejects cycles (CycleError) and, depending on settings, bad estimates
        - computes ES/EF (forward) and LS/LF (backward), slack and criticality
        - projects calendar ranges when a start date is given
        """
        tasks = list(tasks)
        tasks_by_id: Dict[str, PertTask] = index_tasks(tasks)
        if not tasks_by_id:
            return ScheduleResult(
                nodes=[], topo_order=[], project_duration=0.0, rounding=self._settings.rounding
            )

        warnings = self._check_estimates(tasks_by_id.values())
        warnings.extend(self._dangling_warnings(tasks))

        topo_order = topological_sort(tasks)
        durations = {task_id: expected_duration(task) for task_id, task in tasks_by_id.items()}

        es, ef, project_duration = run_forward_pass(tasks_by_id, topo_order, durations)
        logger.debug("Forward pass done: %d tasks, duration %.2f", len(topo_order), project_duration)

        ls, lf = run_backward_pass(
            topo_order=topo_order,
            successors=build_successor_index(tasks),
            durations=durations,
            project_duration=project_duration,
        )

        nodes = build_schedule_nodes(
            tasks_by_id=tasks_by_id,
            durations=durations,
            es=es,
            ef=ef,
            ls=ls,
            lf=lf,
            critical_tolerance=self._settings.critical_tolerance,
        )

        result = ScheduleResult(
            nodes=nodes,
            topo_order=topo_order,
            project_duration=project_duration,
            warnings=warnings,
            rounding=self._settings.rounding,
        )
        if start_date is not None:
            result.calendar = project_dates(nodes, start_date, self._settings.rounding)

        logger.info(
            "Computed CPM schedule: %d tasks, %d critical, duration %.2f",
            len(nodes),
            len(result.critical_ids()),
            project_duration,
        )
        return result

    def _check_estimates(self, tasks) -> List[ScheduleWarning]:
        warnings: List[ScheduleWarning] = []
        for task in tasks:
            if self._settings.validate_estimates:
                validate_estimates(task)
            if not estimates_out_of_order(task):
                continue
            message = (
                f"Task {task.id}: estimates are not ordered optimistic <= likely <= pessimistic "
                f"({task.optimistic}, {task.likely}, {task.pessimistic})."
            )
            if self._settings.strict_estimate_order:
                raise ValidationError(message, code=WarningCode.ESTIMATE_ORDER.value)
            logger.warning(message)
            warnings.append(
                ScheduleWarning(code=WarningCode.ESTIMATE_ORDER, task_id=task.id, message=message)
            )
        return warnings

    def _dangling_warnings(self, tasks: Sequence[PertTask]) -> List[ScheduleWarning]:
        warnings: List[ScheduleWarning] = []
        for task_id, missing_id in find_dangling_dependencies(tasks):
            logger.warning("Task %s depends on unknown task %s; ignoring it", task_id, missing_id)
            warnings.append(
                ScheduleWarning(
                    code=WarningCode.DANGLING_DEPENDENCY,
                    task_id=task_id,
                    message=f"Task {task_id} depends on unknown task {missing_id}.",
                    related_id=missing_id,
                )
            )
        return warnings


def compute_cpm(
    tasks: Sequence[PertTask],
    settings: Optional[ScheduleSettings] = None,
) -> List[CPMNode]:
    return SchedulingEngine(settings).compute(tasks).nodes


__all__ = ["SchedulingEngine", "compute_cpm"]
