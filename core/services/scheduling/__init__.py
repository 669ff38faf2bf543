from .engine import SchedulingEngine, compute_cpm
from .calendar import parse_start_date, project_dates
from .estimates import (
    estimates_from_likely,
    estimates_out_of_order,
    expected_duration,
    round_offset,
    validate_estimates,
)
from .graph import (
    build_successor_index,
    collect_dependents,
    find_dangling_dependencies,
    topological_sort,
)
from .models import CalendarRange, CPMNode, ScheduleResult, ScheduleWarning
from .queries import critical_nodes, critical_path, is_on_critical_path, project_duration
from .settings import ScheduleSettings

__all__ = [
    "SchedulingEngine",
    "compute_cpm",
    "ScheduleSettings",
    "CPMNode",
    "CalendarRange",
    "ScheduleResult",
    "ScheduleWarning",
    "expected_duration",
    "estimates_from_likely",
    "estimates_out_of_order",
    "validate_estimates",
    "round_offset",
    "topological_sort",
    "build_successor_index",
    "find_dangling_dependencies",
    "collect_dependents",
    "parse_start_date",
    "project_dates",
    "project_duration",
    "critical_nodes",
    "critical_path",
    "is_on_critical_path",
]
