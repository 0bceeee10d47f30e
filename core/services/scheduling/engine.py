from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Sequence

from core.domain import Task, TaskId
from core.services.scheduling.duration import task_duration_days
from core.services.scheduling.graph import DependencyEdge, DependencyGraph, build_dependency_graph
from core.services.scheduling.levels import assign_levels
from core.services.scheduling.models import CriticalPathSummary, SchedulingSettings, TaskNode
from core.services.scheduling.passes import run_backward_pass, run_forward_pass
from core.services.scheduling.results import build_task_nodes, summarize_critical_path

logger = logging.getLogger(__name__)


class CriticalPathEngine:
    """
    CPM over whole-day offsets from project start:
    - Kahn ordering of the network (cycles raise CyclicDependencyError)
    - Forward pass: ES/EF
    - Backward pass: LS/LF
    - Slack = LS - ES, critical when slack is zero

    Every call builds its own graph and nodes; nothing is kept between calls.
    """

    def __init__(self, settings: SchedulingSettings | None = None):
        self._settings: SchedulingSettings = settings or SchedulingSettings()

    @property
    def settings(self) -> SchedulingSettings:
        return self._settings

    def duration_of(self, task: Task) -> int:
        return task_duration_days(
            task,
            default_days=self._settings.default_duration_days,
            hours_per_day=self._settings.hours_per_day,
        )

    def build_graph(self, tasks: Sequence[Task], edges: Iterable[DependencyEdge]) -> DependencyGraph:
        tasks_by_id: Dict[TaskId, Task] = {t.id: t for t in tasks}
        return build_dependency_graph(tasks_by_id, edges)

    def compute_critical_path(
        self,
        tasks: Sequence[Task],
        edges: Iterable[DependencyEdge],
    ) -> Dict[TaskId, TaskNode]:
        if not tasks:
            return {}

        tasks_by_id: Dict[TaskId, Task] = {t.id: t for t in tasks}
        graph = build_dependency_graph(tasks_by_id, edges)
        durations = {task_id: self.duration_of(task) for task_id, task in tasks_by_id.items()}

        es, ef, project_end = run_forward_pass(graph, durations)
        ls, lf = run_backward_pass(graph, durations, project_end)

        nodes = build_task_nodes(
            tasks_by_id=tasks_by_id,
            durations=durations,
            es=es,
            ef=ef,
            ls=ls,
            lf=lf,
            levels=assign_levels(graph),
        )
        logger.debug(
            "Critical path computed for %s tasks: duration=%s days, critical=%s",
            len(nodes),
            project_end,
            sum(1 for n in nodes.values() if n.is_critical),
        )
        return nodes

    def compute_levels(self, tasks: Sequence[Task], edges: Iterable[DependencyEdge]) -> Dict[TaskId, int]:
        if not tasks:
            return {}
        return assign_levels(self.build_graph(tasks, edges))

    def summarize(
        self,
        tasks: Sequence[Task],
        edges: Iterable[DependencyEdge],
        project_id: Optional[str] = None,
    ) -> CriticalPathSummary:
        edges = list(edges)
        nodes = self.compute_critical_path(tasks, edges)
        successors = self.build_graph(tasks, edges).successors if nodes else {}
        return summarize_critical_path(nodes, successors, project_id=project_id)


_DEFAULT_ENGINE = CriticalPathEngine()


def compute_critical_path(tasks: Sequence[Task], edges: Iterable[DependencyEdge]) -> Dict[TaskId, TaskNode]:
    return _DEFAULT_ENGINE.compute_critical_path(tasks, edges)


def compute_levels(tasks: Sequence[Task], edges: Iterable[DependencyEdge]) -> Dict[TaskId, int]:
    return _DEFAULT_ENGINE.compute_levels(tasks, edges)


__all__ = ["CriticalPathEngine", "compute_critical_path", "compute_levels"]
