from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from core.domain import Task, TaskLocation
from core.interfaces import AssignmentRepository, Geocoder, TaskRepository
from core.services.routing.geocoder import MockGeocoder
from core.services.routing.geometry import DistanceMetric, euclidean_distance
from core.services.routing.models import RoutePlan, RouteSettings
from core.services.routing.sequencer import optimize_route
from core.services.routing.summary import summarize_route

logger = logging.getLogger(__name__)


class RoutePlanningService:
    """Builds a technician's visiting order for the located tasks of a project."""

    def __init__(
        self,
        task_repo: TaskRepository,
        assignment_repo: AssignmentRepository,
        geocoder: Geocoder | None = None,
        settings: RouteSettings | None = None,
        metric: DistanceMetric = euclidean_distance,
        demo_when_empty: bool = False,
    ):
        self._task_repo: TaskRepository = task_repo
        self._assignment_repo: AssignmentRepository = assignment_repo
        self._geocoder: Geocoder = geocoder or MockGeocoder()
        self._settings: RouteSettings = settings or RouteSettings()
        self._metric: DistanceMetric = metric
        self._demo_when_empty: bool = demo_when_empty

    def list_route_tasks(
        self,
        project_id: str,
        resource_id: Optional[str] = None,
        on_date: Optional[date] = None,
    ) -> List[Task]:
        tasks = [t for t in self._task_repo.list_by_project(project_id) if (t.location or "").strip()]
        if resource_id is not None:
            assigned = {a.task_id for a in self._assignment_repo.list_by_resource(resource_id)}
            tasks = [t for t in tasks if t.id in assigned]
        if on_date is not None:
            tasks = [t for t in tasks if t.planned_start == on_date]
        return tasks

    def plan_route(
        self,
        project_id: str,
        resource_id: Optional[str] = None,
        on_date: Optional[date] = None,
    ) -> RoutePlan:
        tasks = self.list_route_tasks(project_id, resource_id=resource_id, on_date=on_date)
        depot = self._geocoder.depot()

        stops: List[TaskLocation]
        if not tasks and self._demo_when_empty:
            stops = self._geocoder.demo_locations(project_id)
        else:
            stops = [self._geocoder.locate(task) for task in tasks]

        route = optimize_route(stops, depot, metric=self._metric)
        summary = summarize_route(route, depot=depot, settings=self._settings, metric=self._metric)
        logger.info(
            "Planned route for project %s (resource=%s, date=%s): %s stops, %.1f miles",
            project_id,
            resource_id or "-",
            on_date.isoformat() if on_date else "-",
            summary.stop_count,
            summary.total_miles,
        )
        return RoutePlan(
            project_id=project_id,
            depot=depot,
            stops=stops,
            route=route,
            summary=summary,
            resource_id=resource_id,
        )


__all__ = ["RoutePlanningService"]
