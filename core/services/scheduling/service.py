from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from core.domain import LayoutMode, TaskId
from core.interfaces import DependencyRepository, TaskRepository
from core.services.scheduling.engine import CriticalPathEngine
from core.services.scheduling.layout import apply_layout
from core.services.scheduling.models import CriticalPathSummary, TaskNode

logger = logging.getLogger(__name__)


class SchedulingService:
    """Loads a project's network from the repositories and runs the critical-path engine on it."""

    def __init__(
        self,
        task_repo: TaskRepository,
        dependency_repo: DependencyRepository,
        engine: CriticalPathEngine | None = None,
    ):
        self._task_repo: TaskRepository = task_repo
        self._dependency_repo: DependencyRepository = dependency_repo
        self._engine: CriticalPathEngine = engine or CriticalPathEngine()

    def compute_project_schedule(self, project_id: str) -> Dict[TaskId, TaskNode]:
        tasks = self._task_repo.list_by_project(project_id)
        deps = self._dependency_repo.list_by_project(project_id)
        nodes = self._engine.compute_critical_path(tasks, deps)
        logger.info(
            "Scheduled project %s: %s tasks, duration %s days, %s critical",
            project_id,
            len(nodes),
            max((n.earliest_finish for n in nodes.values()), default=0),
            sum(1 for n in nodes.values() if n.is_critical),
        )
        return nodes

    def compute_project_levels(self, project_id: str) -> Dict[TaskId, int]:
        tasks = self._task_repo.list_by_project(project_id)
        deps = self._dependency_repo.list_by_project(project_id)
        return self._engine.compute_levels(tasks, deps)

    def get_critical_path_summary(self, project_id: str) -> CriticalPathSummary:
        tasks = self._task_repo.list_by_project(project_id)
        deps = self._dependency_repo.list_by_project(project_id)
        return self._engine.summarize(tasks, deps, project_id=project_id)

    def layout_project(
        self,
        project_id: str,
        mode: LayoutMode = LayoutMode.HIERARCHICAL,
        today: Optional[date] = None,
    ) -> Dict[TaskId, TaskNode]:
        nodes = self.compute_project_schedule(project_id)
        apply_layout(nodes, mode, today=today)
        return nodes


__all__ = ["SchedulingService"]
