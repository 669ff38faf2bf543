from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from core.services.planner import PlannerService
from core.services.scheduling import ScheduleSettings, SchedulingEngine
from infra.settings import load_schedule_settings


@dataclass(frozen=True)
class ServiceGraph:
    settings: ScheduleSettings
    scheduling_engine: SchedulingEngine
    planner_service: PlannerService

    def as_dict(self) -> dict[str, Any]:
        return {
            "settings": self.settings,
            "scheduling_engine": self.scheduling_engine,
            "planner_service": self.planner_service,
        }


def build_service_graph(settings: Optional[ScheduleSettings] = None) -> ServiceGraph:
    settings = settings or load_schedule_settings()
    scheduling_engine = SchedulingEngine(settings)
    planner_service = PlannerService(scheduling_engine)
    return ServiceGraph(
        settings=settings,
        scheduling_engine=scheduling_engine,
        planner_service=planner_service,
    )


def build_service_dict(settings: Optional[ScheduleSettings] = None) -> dict[str, Any]:
    return build_service_graph(settings).as_dict()


__all__ = ["ServiceGraph", "build_service_graph", "build_service_dict"]
