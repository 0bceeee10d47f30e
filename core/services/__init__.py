from .routing import RoutePlanningService, RouteSettings, optimize_route
from .scheduling import CriticalPathEngine, SchedulingService, SchedulingSettings, TaskNode, compute_critical_path, compute_levels
from .task import TaskDependencyService

__all__ = [
    "CriticalPathEngine",
    "SchedulingService",
    "SchedulingSettings",
    "TaskNode",
    "compute_critical_path",
    "compute_levels",
    "TaskDependencyService",
    "RoutePlanningService",
    "RouteSettings",
    "optimize_route",
]
