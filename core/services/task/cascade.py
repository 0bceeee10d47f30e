from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Set

from core.domain import DependencyType, Task, TaskDependency, TaskId
from core.interfaces import DependencyRepository, TaskRepository

logger = logging.getLogger(__name__)


def successor_start_date(predecessor: Task, successor: Task, dependency: TaskDependency) -> Optional[date]:
    """
    Start date the successor should take so the link holds exactly.
    Returns None when the dates needed for the link are missing.
    """
    if predecessor.planned_start is None or predecessor.planned_end is None:
        return None

    lag = int(dependency.lag_days or 0)
    dep_type = dependency.dependency_type

    if dep_type == DependencyType.FINISH_TO_START:
        return predecessor.planned_end + timedelta(days=lag + 1)
    if dep_type == DependencyType.START_TO_START:
        return predecessor.planned_start + timedelta(days=lag)

    if successor.planned_start is None or successor.planned_end is None:
        return None
    span = successor.planned_end - successor.planned_start

    if dep_type == DependencyType.FINISH_TO_FINISH:
        return predecessor.planned_end + timedelta(days=lag) - span
    if dep_type == DependencyType.START_TO_FINISH:
        return predecessor.planned_start + timedelta(days=lag) - span
    return None


class TaskDependencyCascadeMixin:
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository

    def cascade_dates(self, task_id: TaskId) -> List[Task]:
        """
        Moves every successor of ``task_id`` so its links hold, keeping each
        successor's span, and repeats downstream. Returns the updated tasks.
        """
        updated: Dict[TaskId, Task] = {}
        self._cascade_from(task_id, path=set(), updated=updated)
        if updated:
            logger.info("Cascaded dates from task %s to %s successor(s)", task_id, len(updated))
        return list(updated.values())

    def _cascade_from(self, task_id: TaskId, path: Set[TaskId], updated: Dict[TaskId, Task]) -> None:
        task = self._task_repo.get(task_id)
        if task is None or task.planned_start is None or task.planned_end is None:
            return

        path = path | {task_id}
        for dependency in self._dependency_repo.list_by_predecessor(task_id):
            succ_id = dependency.successor_task_id
            if succ_id in path:
                logger.warning("Skipping cascade into %s: already on the cascade path", succ_id)
                continue
            successor = self._task_repo.get(succ_id)
            if successor is None:
                continue

            new_start = successor_start_date(task, successor, dependency)
            if new_start is None or new_start == successor.planned_start:
                continue

            span = timedelta(days=0)
            if successor.planned_start is not None and successor.planned_end is not None:
                span = successor.planned_end - successor.planned_start
            successor.planned_start = new_start
            successor.planned_end = new_start + span
            self._task_repo.update(successor)
            updated.setdefault(succ_id, successor)

            self._cascade_from(succ_id, path, updated)


__all__ = ["TaskDependencyCascadeMixin", "successor_start_date"]
