from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from core.reporting.contexts import RouteExportContext, ScheduleExportContext

HEADER_FONT = Font(bold=True)
TITLE_FONT = Font(bold=True, size=14)
CENTER = Alignment(horizontal="center")
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)
HEADER_FILL = PatternFill("solid", fgColor="DDDDDD")
CRITICAL_FILL = PatternFill("solid", fgColor="FFCCCC")


def _write_header(ws, headers, row=1):
    for col_index, h in enumerate(headers, start=1):
        cell = ws.cell(row=row, column=col_index, value=h)
        cell.font = HEADER_FONT
        cell.alignment = CENTER
        cell.fill = HEADER_FILL
        cell.border = THIN_BORDER


class ExcelScheduleRenderer:
    def render(self, ctx: ScheduleExportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        # ---------------- Summary ----------------
        ws = wb.active
        ws.title = "Summary"
        ws["A1"] = f"Critical Path Analysis - {ctx.title}"
        ws["A1"].font = TITLE_FONT

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = HEADER_FONT
            ws[f"A{row}"].border = THIN_BORDER
            ws[f"B{row}"].border = THIN_BORDER
            row += 1

        summary = ctx.summary
        kv("As of", ctx.as_of.isoformat())
        kv("Total tasks", summary.total_tasks)
        kv("Critical tasks", summary.critical_tasks)
        kv("Critical percentage", round(summary.critical_percentage, 1))
        kv("Project duration (days)", summary.project_duration_days)
        kv("Critical chains", len(summary.chains))

        ws.column_dimensions["A"].width = 28
        ws.column_dimensions["B"].width = 20

        # ---------------- Critical Path ----------------
        ws_cp = wb.create_sheet("Critical Path")
        headers = ["Task ID", "Name", "Duration (days)", "ES", "EF", "LS", "LF", "Slack", "Critical", "Level"]
        _write_header(ws_cp, headers)

        for row_index, node in enumerate(ctx.nodes, start=2):
            values = [
                str(node.task_id),
                node.task.name,
                node.duration,
                node.earliest_start,
                node.earliest_finish,
                node.latest_start,
                node.latest_finish,
                node.slack,
                "Yes" if node.is_critical else "No",
                node.level,
            ]
            for col_index, value in enumerate(values, start=1):
                cell = ws_cp.cell(row=row_index, column=col_index, value=value)
                cell.border = THIN_BORDER
                if node.is_critical:
                    cell.fill = CRITICAL_FILL

        ws_cp.column_dimensions["A"].width = 36
        ws_cp.column_dimensions["B"].width = 30
        for col_letter in ("C", "D", "E", "F", "G", "H", "I", "J"):
            ws_cp.column_dimensions[col_letter].width = 12

        wb.save(output_path)
        return output_path


class ExcelRouteRenderer:
    def render(self, ctx: RouteExportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()
        ws = wb.active
        ws.title = "Route"

        ws["A1"] = f"Optimized Route - {ctx.title}"
        ws["A1"].font = TITLE_FONT
        ws["A2"] = f"Technician: {ctx.technician or 'All Technicians'} | As of {ctx.as_of.isoformat()}"

        headers = ["Stop", "Task", "Address", "Priority", "Miles to next"]
        _write_header(ws, headers, row=4)

        plan = ctx.plan
        legs = plan.summary.legs if plan.summary else []
        row = 5
        for index, location in enumerate(plan.route):
            priority = location.task.priority.value if location.task is not None else ""
            miles = round(legs[index].miles, 1) if index < len(legs) else ""
            values = [index, location.label, location.address or "No address", priority, miles]
            for col_index, value in enumerate(values, start=1):
                ws.cell(row=row, column=col_index, value=value).border = THIN_BORDER
            row += 1

        if plan.summary is not None:
            row += 1
            totals = [
                ("Total stops", plan.summary.stop_count),
                ("Total distance (miles)", round(plan.summary.total_miles, 1)),
                ("Travel time (hours)", round(plan.summary.travel_hours, 1)),
                ("Service time (hours)", round(plan.summary.service_hours, 1)),
                ("Total time (hours)", round(plan.summary.total_hours, 1)),
            ]
            for key, value in totals:
                ws.cell(row=row, column=1, value=key).font = HEADER_FONT
                ws.cell(row=row, column=2, value=value)
                row += 1

        ws.column_dimensions["A"].width = 22
        ws.column_dimensions["B"].width = 30
        ws.column_dimensions["C"].width = 30
        ws.column_dimensions["D"].width = 12
        ws.column_dimensions["E"].width = 15

        wb.save(output_path)
        return output_path
