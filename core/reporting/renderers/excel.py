from datetime import timedelta
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from core.reporting.contexts import ScheduleReportContext
from core.services.scheduling.estimates import round_offset

SCHEDULE_HEADERS = [
    "Task ID",
    "Name",
    "Category",
    "Optimistic",
    "Most likely",
    "Pessimistic",
    "Duration",
    "Early start",
    "Early finish",
    "Late start",
    "Late finish",
    "Slack",
    "Critical",
    "Start date",
    "End date",
]


def _num(value: float) -> float:
    return round(float(value), 2)


class ScheduleExcelRenderer:
    def render(self, ctx: ScheduleReportContext, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        critical_fill = PatternFill("solid", fgColor="FFCCCC")

        result = ctx.result

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"

        ws["A1"] = f"PERT schedule - {ctx.project_name}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("Project name", ctx.project_name)
        kv("Start date", ctx.start_date.isoformat() if ctx.start_date else "")
        kv("Duration (days)", _num(result.project_duration))
        if ctx.start_date:
            finish_offset = round_offset(result.project_duration, result.rounding)
            finish = ctx.start_date + timedelta(days=finish_offset)
            kv("Finish date", finish.isoformat())
        kv("Tasks - total", len(result.nodes))
        kv("Critical tasks", len(result.critical_ids()))
        kv("Warnings", len(result.warnings))

        ws.column_dimensions["A"].width = 30
        ws.column_dimensions["B"].width = 25

        # ---------------- Schedule ----------------
        ws_tasks = wb.create_sheet("Schedule")
        for col_index, h in enumerate(SCHEDULE_HEADERS, start=1):
            cell = ws_tasks.cell(row=1, column=col_index, value=h)
            cell.font = header_font
            cell.alignment = center
            cell.fill = header_fill
            cell.border = thin_border

        for row_index, node in enumerate(result.nodes, start=2):
            dates = result.calendar.get(node.id)
            values = [
                node.id,
                node.name,
                node.category or "",
                node.task.optimistic,
                node.task.likely,
                node.task.pessimistic,
                _num(node.duration),
                _num(node.early_start),
                _num(node.early_finish),
                _num(node.late_start),
                _num(node.late_finish),
                _num(node.slack),
                "Yes" if node.is_critical else "No",
                dates.start_date.isoformat() if dates else "",
                dates.end_date.isoformat() if dates else "",
            ]
            for col_index, value in enumerate(values, start=1):
                cell = ws_tasks.cell(row=row_index, column=col_index, value=value)
                cell.border = thin_border
                if node.is_critical:
                    cell.fill = critical_fill

        ws_tasks.column_dimensions["A"].width = 14
        ws_tasks.column_dimensions["B"].width = 30
        for col_letter in "CDEFGHIJKLMNO":
            ws_tasks.column_dimensions[col_letter].width = 13

        wb.save(output_path)
        return output_path
