from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.services.scheduling.models import ScheduleResult


@dataclass
class ScheduleReportContext:
    project_name: str
    result: ScheduleResult
    start_date: Optional[date] = None
