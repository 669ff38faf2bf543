# tests/conftest.py
import pytest

from core.domain import PertTask
from core.services.scheduling import ScheduleSettings, SchedulingEngine
from infra.services import build_service_dict


def make_task(task_id, optimistic, likely, pessimistic, deps=(), **extra):
    return PertTask(
        id=task_id,
        name=extra.pop("name", f"Task {task_id}"),
        optimistic=optimistic,
        likely=likely,
        pessimistic=pessimistic,
        dependencies=tuple(deps),
        **extra,
    )


@pytest.fixture
def diamond_tasks():
    # A -> (B, C) -> D
    return [
        make_task("A", 1, 2, 3),
        make_task("B", 2, 3, 6, ["A"]),
        make_task("C", 1, 2, 4, ["A"]),
        make_task("D", 3, 5, 8, ["B", "C"]),
    ]


@pytest.fixture
def engine():
    return SchedulingEngine(ScheduleSettings())


@pytest.fixture
def services(monkeypatch):
    for name in (
        "PM_CRITICAL_TOLERANCE",
        "PM_DATE_ROUNDING",
        "PM_VALIDATE_ESTIMATES",
        "PM_STRICT_ESTIMATE_ORDER",
    ):
        monkeypatch.delenv(name, raising=False)
    return build_service_dict()


@pytest.fixture
def task_factory():
    return make_task
