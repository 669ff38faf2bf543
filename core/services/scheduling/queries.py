from __future__ import annotations

from typing import Dict, List, Sequence

from core.services.scheduling.models import CPMNode
from core.services.scheduling.settings import DEFAULT_CRITICAL_TOLERANCE


def project_duration(nodes: Sequence[CPMNode]) -> float:
    return max((node.early_finish for node in nodes), default=0.0)


def critical_nodes(nodes: Sequence[CPMNode]) -> List[CPMNode]:
    return [node for node in nodes if node.is_critical]


def is_on_critical_path(nodes: Sequence[CPMNode], task_id: str) -> bool:
    return any(node.id == task_id and node.is_critical for node in nodes)


def critical_path(
    nodes: Sequence[CPMNode],
    tolerance: float = DEFAULT_CRITICAL_TOLERANCE,
) -> List[str]:
    """
    One chain of critical task ids from a task with no dependencies to a
    task with no successors.

    Each step moves to a critical successor that starts when the current
    task finishes. When several qualify the first in input order wins.
    """
    by_id: Dict[str, CPMNode] = {node.id: node for node in nodes}
    successors: Dict[str, List[CPMNode]] = {node.id: [] for node in nodes}
    for node in nodes:
        for dep_id in dict.fromkeys(node.dependencies):
            if dep_id in by_id:
                successors[dep_id].append(node)

    start = next(
        (
            node
            for node in nodes
            if node.is_critical and not any(dep_id in by_id for dep_id in node.dependencies)
        ),
        None,
    )
    if start is None:
        return []

    path = [start.id]
    current = start
    while successors[current.id]:
        nxt = next(
            (
                succ
                for succ in successors[current.id]
                if succ.is_critical
                and succ.id not in path
                and abs(succ.early_start - current.early_finish) < tolerance
            ),
            None,
        )
        if nxt is None:
            break
        path.append(nxt.id)
        current = nxt
    return path


__all__ = ["project_duration", "critical_nodes", "is_on_critical_path", "critical_path"]
