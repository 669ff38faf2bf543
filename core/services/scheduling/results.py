from __future__ import annotations

from typing import Dict, List

from core.domain.task import PertTask
from core.services.scheduling.models import CPMNode


def build_schedule_nodes(
    tasks_by_id: Dict[str, PertTask],
    durations: Dict[str, float],
    es: Dict[str, float],
    ef: Dict[str, float],
    ls: Dict[str, float],
    lf: Dict[str, float],
    critical_tolerance: float,
) -> List[CPMNode]:
    nodes: List[CPMNode] = []

    for task_id, task in tasks_by_id.items():
        slack = ls[task_id] - es[task_id]
        nodes.append(
            CPMNode(
                task=task,
                duration=durations[task_id],
                early_start=es[task_id],
                early_finish=ef[task_id],
                late_start=ls[task_id],
                late_finish=lf[task_id],
                slack=slack,
                is_critical=abs(slack) < critical_tolerance,
            )
        )

    return nodes


__all__ = ["build_schedule_nodes"]
