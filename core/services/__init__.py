from .scheduling import ScheduleSettings, SchedulingEngine, compute_cpm
from .export import TodoItem, export_to_todos
from .planner import PlannerService
