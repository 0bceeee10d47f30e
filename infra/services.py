from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from core.interfaces import AssignmentRepository, DependencyRepository, Geocoder, TaskRepository
from core.services.routing import MockGeocoder, RoutePlanningService
from core.services.scheduling import CriticalPathEngine, SchedulingService
from core.services.task import TaskDependencyService
from infra.memory import InMemoryAssignmentRepository, InMemoryDependencyRepository, InMemoryTaskRepository
from infra.settings import load_route_settings, load_scheduling_settings


@dataclass(frozen=True)
class ServiceGraph:
    task_repo: TaskRepository
    dependency_repo: DependencyRepository
    assignment_repo: AssignmentRepository
    critical_path_engine: CriticalPathEngine
    scheduling_service: SchedulingService
    dependency_service: TaskDependencyService
    route_planning_service: RoutePlanningService

    def as_dict(self) -> dict[str, Any]:
        return {
            "task_repo": self.task_repo,
            "dependency_repo": self.dependency_repo,
            "assignment_repo": self.assignment_repo,
            "critical_path_engine": self.critical_path_engine,
            "scheduling_service": self.scheduling_service,
            "dependency_service": self.dependency_service,
            "route_planning_service": self.route_planning_service,
        }


def build_service_graph(
    task_repo: TaskRepository | None = None,
    dependency_repo: DependencyRepository | None = None,
    assignment_repo: AssignmentRepository | None = None,
    geocoder: Geocoder | None = None,
    env: Mapping[str, str] | None = None,
    demo_when_empty: bool = False,
) -> ServiceGraph:
    """
    Wires repositories and services. Repositories default to the in-memory
    implementations; a host application passes its own task store instead.
    """
    task_repo = task_repo or InMemoryTaskRepository()
    dependency_repo = dependency_repo or InMemoryDependencyRepository(task_repo)
    assignment_repo = assignment_repo or InMemoryAssignmentRepository()

    engine = CriticalPathEngine(load_scheduling_settings(env))
    scheduling_service = SchedulingService(task_repo, dependency_repo, engine=engine)
    dependency_service = TaskDependencyService(task_repo, dependency_repo)
    route_planning_service = RoutePlanningService(
        task_repo,
        assignment_repo,
        geocoder=geocoder or MockGeocoder(),
        settings=load_route_settings(env),
        demo_when_empty=demo_when_empty,
    )

    return ServiceGraph(
        task_repo=task_repo,
        dependency_repo=dependency_repo,
        assignment_repo=assignment_repo,
        critical_path_engine=engine,
        scheduling_service=scheduling_service,
        dependency_service=dependency_service,
        route_planning_service=route_planning_service,
    )


def build_services(**kwargs: Any) -> dict[str, Any]:
    return build_service_graph(**kwargs).as_dict()


__all__ = ["ServiceGraph", "build_service_graph", "build_services"]
