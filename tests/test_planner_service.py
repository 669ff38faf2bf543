from datetime import date

import pytest

from core.exceptions import CycleError


SAMPLE_PAYLOAD = [
    {"id": "1", "name": "Define Scope", "optimistic": 1, "likely": 2, "pessimistic": 3, "dependencies": []},
    {"id": "2", "name": "Market Research", "optimistic": 2, "likely": 3, "pessimistic": 6, "dependencies": ["1"]},
    {"id": "3", "name": "Technical Spec", "optimistic": 1, "likely": 2, "pessimistic": 4, "dependencies": ["1"]},
    {"id": "4", "name": "Prototype", "optimistic": 3, "likely": 5, "pessimistic": 8, "dependencies": ["2", "3"]},
]


def test_schedule_as_dict_for_front_end(services):
    planner = services["planner_service"]
    data = planner.schedule_as_dict(SAMPLE_PAYLOAD, start_date="2026-01-01")

    assert [n["id"] for n in data["nodes"]] == ["1", "2", "3", "4"]
    assert data["criticalIds"] == ["1", "2", "4"]
    assert data["projectDuration"] == pytest.approx(10.5)
    assert data["calendar"]["1"] == {"startDate": "2026-01-01", "endDate": "2026-01-03"}
    assert data["warnings"] == []

    first = data["nodes"][0]
    assert first["earlyStart"] == 0
    assert first["isCritical"] is True
    assert first["dependencies"] == []


def test_schedule_reports_dangling_dependency(services):
    planner = services["planner_service"]
    payload = [dict(SAMPLE_PAYLOAD[0], dependencies="0, ")]
    data = planner.schedule_as_dict(payload)

    assert data["warnings"][0]["code"] == "DANGLING_DEPENDENCY"
    assert data["warnings"][0]["relatedId"] == "0"
    assert data["calendar"] == {}


def test_schedule_cycle_surfaces_to_caller(services):
    planner = services["planner_service"]
    payload = [
        dict(SAMPLE_PAYLOAD[0], dependencies=["4"]),
        *SAMPLE_PAYLOAD[1:],
    ]
    with pytest.raises(CycleError):
        planner.schedule(payload)


def test_export_todos_from_payload(services):
    planner = services["planner_service"]
    todos = planner.export_todos(SAMPLE_PAYLOAD, "proj-1", "Website", start_date=date(2026, 2, 2))

    assert len(todos) == 4
    assert todos[-1].title == "Prototype"
    assert todos[-1].scheduled_date == date(2026, 2, 7)


def test_service_graph_uses_env_settings(monkeypatch):
    from infra.services import build_service_graph

    monkeypatch.setenv("PM_STRICT_ESTIMATE_ORDER", "yes")
    graph = build_service_graph()

    assert graph.settings.strict_estimate_order is True
    assert graph.scheduling_engine.settings is graph.settings
