from __future__ import annotations

from typing import Dict, List

from core.domain.task import PertTask


def run_forward_pass(
    tasks_by_id: Dict[str, PertTask],
    topo_order: List[str],
    durations: Dict[str, float],
) -> tuple[Dict[str, float], Dict[str, float], float]:
    es: Dict[str, float] = {}
    ef: Dict[str, float] = {}

    for task_id in topo_order:
        start = 0.0
        for dep_id in tasks_by_id[task_id].dependencies:
            if dep_id in ef:
                start = max(start, ef[dep_id])
        es[task_id] = start
        ef[task_id] = start + durations[task_id]

    project_duration = max(ef.values(), default=0.0)
    return es, ef, project_duration


def run_backward_pass(
    topo_order: List[str],
    successors: Dict[str, List[str]],
    durations: Dict[str, float],
    project_duration: float,
) -> tuple[Dict[str, float], Dict[str, float]]:
    ls: Dict[str, float] = {}
    lf: Dict[str, float] = {}

    for task_id in reversed(topo_order):
        outgoing = successors.get(task_id, [])
        if outgoing:
            finish = min(ls[succ_id] for succ_id in outgoing)
        else:
            finish = project_duration
        lf[task_id] = finish
        ls[task_id] = finish - durations[task_id]

    return ls, lf


__all__ = ["run_forward_pass", "run_backward_pass"]
