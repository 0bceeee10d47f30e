from .duration import task_duration_days
from .engine import CriticalPathEngine, compute_critical_path, compute_levels
from .graph import DependencyGraph, build_dependency_graph
from .layout import apply_layout
from .models import CriticalPathSummary, SchedulingSettings, TaskNode
from .results import critical_chains, critical_path_ids, summarize_critical_path
from .service import SchedulingService

__all__ = [
    "CriticalPathEngine",
    "CriticalPathSummary",
    "DependencyGraph",
    "SchedulingService",
    "SchedulingSettings",
    "TaskNode",
    "apply_layout",
    "build_dependency_graph",
    "compute_critical_path",
    "compute_levels",
    "critical_chains",
    "critical_path_ids",
    "summarize_critical_path",
    "task_duration_days",
]
