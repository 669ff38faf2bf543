from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Sequence

from core.domain.task import PertTask
from core.exceptions import CycleError, NotFoundError, ValidationError

_UNVISITED = 0
_IN_PROGRESS = 1
_DONE = 2


def index_tasks(tasks: Sequence[PertTask]) -> Dict[str, PertTask]:
    tasks_by_id: Dict[str, PertTask] = {}
    for task in tasks:
        if task.id in tasks_by_id:
            raise ValidationError(
                f"Duplicate task id '{task.id}' in schedule input.",
                code="TASK_ID_DUPLICATE",
            )
        tasks_by_id[task.id] = task
    return tasks_by_id


def topological_sort(tasks: Sequence[PertTask]) -> List[str]:
    """
    Order task ids so that every task comes after all of its dependencies.

    Depth-first over declared dependencies with an explicit stack of
    (task_id, dependency iterator) frames, so deep chains do not hit the
    interpreter recursion limit. Roots are taken in input order, which makes
    the result deterministic for a given input. Dependencies that do not
    resolve to a task are skipped. Raises CycleError on a back-edge.
    """
    tasks_by_id = index_tasks(tasks)
    state: Dict[str, int] = {task_id: _UNVISITED for task_id in tasks_by_id}
    order: List[str] = []

    for root_id in tasks_by_id:
        if state[root_id] != _UNVISITED:
            continue

        state[root_id] = _IN_PROGRESS
        stack: List[tuple[str, Iterator[str]]] = [
            (root_id, iter(tasks_by_id[root_id].dependencies))
        ]
        while stack:
            task_id, pending = stack[-1]
            for dep_id in pending:
                dep_state = state.get(dep_id)
                if dep_state is None or dep_state == _DONE:
                    continue
                if dep_state == _IN_PROGRESS:
                    raise CycleError()
                state[dep_id] = _IN_PROGRESS
                stack.append((dep_id, iter(tasks_by_id[dep_id].dependencies)))
                break
            else:
                stack.pop()
                state[task_id] = _DONE
                order.append(task_id)

    return order


def build_successor_index(tasks: Sequence[PertTask]) -> Dict[str, List[str]]:
    known = {task.id for task in tasks}
    successors: Dict[str, List[str]] = {task.id: [] for task in tasks}
    for task in tasks:
        for dep_id in task.dependencies:
            if dep_id not in known:
                continue
            succ = successors[dep_id]
            if task.id not in succ:
                succ.append(task.id)
    return successors


def find_dangling_dependencies(tasks: Sequence[PertTask]) -> List[tuple[str, str]]:
    known = {task.id for task in tasks}
    dangling: List[tuple[str, str]] = []
    for task in tasks:
        seen: set[str] = set()
        for dep_id in task.dependencies:
            if dep_id in known or dep_id in seen:
                continue
            seen.add(dep_id)
            dangling.append((task.id, dep_id))
    return dangling


def collect_dependents(tasks: Sequence[PertTask], task_id: str) -> List[str]:
    """
    Every task that directly or transitively depends on ``task_id``,
    in breadth-first discovery order. The task itself is not included.
    """
    successors = build_successor_index(tasks)
    if task_id not in successors:
        raise NotFoundError(f"Task '{task_id}' not found.", code="TASK_NOT_FOUND")

    queue = deque(successors[task_id])
    visited: set[str] = {task_id}
    dependents: List[str] = []
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        dependents.append(current)
        for nxt in successors.get(current, []):
            if nxt not in visited:
                queue.append(nxt)
    return dependents


__all__ = [
    "index_tasks",
    "topological_sort",
    "build_successor_index",
    "find_dangling_dependencies",
    "collect_dependents",
]
