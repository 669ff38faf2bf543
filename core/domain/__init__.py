from core.domain.enums import RoundingMode, TimeUnit, WarningCode
from core.domain.identifiers import generate_id, generate_task_key
from core.domain.task import PertTask, parse_dependency_ids

__all__ = [
    "generate_id",
    "generate_task_key",
    "TimeUnit",
    "RoundingMode",
    "WarningCode",
    "PertTask",
    "parse_dependency_ids",
]
