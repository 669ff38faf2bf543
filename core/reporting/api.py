"""Reporting API wrappers around renderer classes."""

from dataclasses import replace
from datetime import date, datetime
from pathlib import Path

from core.reporting.contexts import ScheduleReportContext
from core.reporting.renderers.excel import ScheduleExcelRenderer
from core.services.scheduling.calendar import parse_start_date, project_dates
from core.services.scheduling.models import ScheduleResult


def generate_schedule_excel(
    result: ScheduleResult,
    project_name: str,
    output_path: str | Path,
    start_date: date | datetime | str | None = None,
) -> Path:
    start = parse_start_date(start_date)
    if start is not None and not result.calendar:
        result = replace(result, calendar=project_dates(result.nodes, start, result.rounding))

    ctx = ScheduleReportContext(
        project_name=project_name,
        result=result,
        start_date=start,
    )
    return ScheduleExcelRenderer().render(ctx, Path(output_path))
