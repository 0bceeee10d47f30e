from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from core.domain import DependencyType, Task, TaskId
from core.interfaces import DependencyRepository, TaskRepository
from core.services.task.models import DependencyCheck


def dates_compatible(predecessor: Task, successor: Task, dependency_type: DependencyType) -> bool:
    """
    Whether the current planned dates already honour the relationship.
    Tasks missing either planned date cannot be checked and pass.
    """
    dates = (predecessor.planned_start, predecessor.planned_end, successor.planned_start, successor.planned_end)
    if any(d is None for d in dates):
        return True

    if dependency_type == DependencyType.FINISH_TO_START:
        return successor.planned_start >= predecessor.planned_end
    if dependency_type == DependencyType.START_TO_START:
        return successor.planned_start >= predecessor.planned_start
    if dependency_type == DependencyType.FINISH_TO_FINISH:
        return successor.planned_end >= predecessor.planned_end
    if dependency_type == DependencyType.START_TO_FINISH:
        return successor.planned_end >= predecessor.planned_start
    return True


class TaskDependencyValidationMixin:
    _task_repo: TaskRepository
    _dependency_repo: DependencyRepository

    def validate_dependency(
        self,
        predecessor_id: TaskId,
        successor_id: TaskId,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
    ) -> DependencyCheck:
        if predecessor_id == successor_id:
            return self._check(False, "DEPENDENCY_SELF", "A task cannot depend on itself.",
                               predecessor_id, successor_id, dependency_type)

        predecessor = self._task_repo.get(predecessor_id)
        if predecessor is None:
            return self._check(False, "TASK_NOT_FOUND", f"Predecessor task '{predecessor_id}' does not exist.",
                               predecessor_id, successor_id, dependency_type)
        successor = self._task_repo.get(successor_id)
        if successor is None:
            return self._check(False, "TASK_NOT_FOUND", f"Successor task '{successor_id}' does not exist.",
                               predecessor_id, successor_id, dependency_type)

        cycle = self._find_cycle_path_ids(predecessor.project_id, predecessor_id, successor_id)
        if cycle:
            trail = " -> ".join(str(task_id) for task_id in cycle)
            return self._check(False, "DEPENDENCY_CYCLE", f"Dependency would create a cycle: {trail}.",
                               predecessor_id, successor_id, dependency_type)

        if not dates_compatible(predecessor, successor, dependency_type):
            return self._check(
                False,
                "DEPENDENCY_DATE_CONFLICT",
                f"Planned dates of '{successor.name}' conflict with a "
                f"{dependency_type.value} link from '{predecessor.name}'.",
                predecessor_id,
                successor_id,
                dependency_type,
            )

        return self._check(True, "OK", "Dependency is valid.", predecessor_id, successor_id, dependency_type)

    def _find_cycle_path_ids(
        self,
        project_id: str,
        predecessor_id: TaskId,
        successor_id: TaskId,
    ) -> Optional[List[TaskId]]:
        """Path successor -> ... -> predecessor through existing links, closed by the new edge."""
        successors: Dict[TaskId, List[TaskId]] = {}
        for dep in self._dependency_repo.list_by_project(project_id):
            successors.setdefault(dep.predecessor_task_id, []).append(dep.successor_task_id)

        parent: Dict[TaskId, Optional[TaskId]] = {successor_id: None}
        queue = deque([successor_id])
        while queue:
            current = queue.popleft()
            if current == predecessor_id:
                path: List[TaskId] = []
                node: Optional[TaskId] = current
                while node is not None:
                    path.append(node)
                    node = parent[node]
                path.reverse()
                return [predecessor_id] + path
            for nxt in successors.get(current, []):
                if nxt not in parent:
                    parent[nxt] = current
                    queue.append(nxt)
        return None

    @staticmethod
    def _check(
        is_valid: bool,
        code: str,
        summary: str,
        predecessor_id: TaskId,
        successor_id: TaskId,
        dependency_type: DependencyType,
    ) -> DependencyCheck:
        return DependencyCheck(
            is_valid=is_valid,
            code=code,
            summary=summary,
            predecessor_task_id=predecessor_id,
            successor_task_id=successor_id,
            dependency_type=dependency_type,
        )


__all__ = ["TaskDependencyValidationMixin", "dates_compatible"]
