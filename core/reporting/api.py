"""Reporting API wrappers around renderer classes."""

from datetime import date
from pathlib import Path

from core.reporting.contexts import RouteExportContext, ScheduleExportContext
from core.reporting.renderers.excel import ExcelRouteRenderer, ExcelScheduleRenderer
from core.reporting.renderers.pdf import PdfRouteRenderer
from core.services.routing import RoutePlan
from core.services.scheduling import SchedulingService


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_schedule_excel(
    scheduling_service: SchedulingService,
    project_id: str,
    output_path: str | Path,
    title: str | None = None,
    as_of: date | None = None,
) -> Path:
    nodes = scheduling_service.compute_project_schedule(project_id)
    summary = scheduling_service.get_critical_path_summary(project_id)
    ordered = sorted(nodes.values(), key=lambda n: (n.earliest_start, n.level))
    ctx = ScheduleExportContext(
        summary=summary,
        nodes=ordered,
        title=title or project_id,
        as_of=as_of or date.today(),
    )
    return ExcelScheduleRenderer().render(ctx, _ensure_parent(Path(output_path)))


def _route_context(plan: RoutePlan, title: str | None, as_of: date | None, technician: str | None):
    return RouteExportContext(
        plan=plan,
        title=title or plan.project_id,
        as_of=as_of or date.today(),
        technician=technician,
    )


def export_route_excel(
    plan: RoutePlan,
    output_path: str | Path,
    title: str | None = None,
    as_of: date | None = None,
    technician: str | None = None,
) -> Path:
    ctx = _route_context(plan, title, as_of, technician)
    return ExcelRouteRenderer().render(ctx, _ensure_parent(Path(output_path)))


def export_route_pdf(
    plan: RoutePlan,
    output_path: str | Path,
    title: str | None = None,
    as_of: date | None = None,
    technician: str | None = None,
) -> Path:
    ctx = _route_context(plan, title, as_of, technician)
    return PdfRouteRenderer().render(ctx, _ensure_parent(Path(output_path)))
