from __future__ import annotations

from threading import RLock
from typing import Dict, List, Optional

from core.domain import Task, TaskAssignment, TaskDependency, TaskId
from core.exceptions import NotFoundError
from core.interfaces import AssignmentRepository, DependencyRepository, TaskRepository


class InMemoryTaskRepository(TaskRepository):
    def __init__(self) -> None:
        self._tasks: Dict[TaskId, Task] = {}
        self._lock = RLock()

    def add(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task

    def update(self, task: Task) -> None:
        with self._lock:
            if task.id not in self._tasks:
                raise NotFoundError("Task not found.", code="TASK_NOT_FOUND")
            self._tasks[task.id] = task

    def get(self, task_id: TaskId) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def list_by_project(self, project_id: str) -> List[Task]:
        with self._lock:
            return [t for t in self._tasks.values() if t.project_id == project_id]


class InMemoryDependencyRepository(DependencyRepository):
    def __init__(self, task_repo: TaskRepository) -> None:
        self._task_repo = task_repo
        self._deps: Dict[str, TaskDependency] = {}
        self._lock = RLock()

    def add(self, dependency: TaskDependency) -> None:
        with self._lock:
            self._deps[dependency.id] = dependency

    def delete(self, dependency_id: str) -> None:
        with self._lock:
            if self._deps.pop(dependency_id, None) is None:
                raise NotFoundError("Dependency not found.", code="DEPENDENCY_NOT_FOUND")

    def list_by_project(self, project_id: str) -> List[TaskDependency]:
        with self._lock:
            deps = list(self._deps.values())
        result = []
        for dep in deps:
            task = self._task_repo.get(dep.successor_task_id)
            if task is not None and task.project_id == project_id:
                result.append(dep)
        return result

    def list_by_predecessor(self, task_id: TaskId) -> List[TaskDependency]:
        with self._lock:
            return [d for d in self._deps.values() if d.predecessor_task_id == task_id]


class InMemoryAssignmentRepository(AssignmentRepository):
    def __init__(self) -> None:
        self._assignments: Dict[str, TaskAssignment] = {}
        self._lock = RLock()

    def add(self, assignment: TaskAssignment) -> None:
        with self._lock:
            self._assignments[assignment.id] = assignment

    def list_by_resource(self, resource_id: str) -> List[TaskAssignment]:
        with self._lock:
            return [a for a in self._assignments.values() if a.resource_id == resource_id]

    def list_by_task(self, task_id: TaskId) -> List[TaskAssignment]:
        with self._lock:
            return [a for a in self._assignments.values() if a.task_id == task_id]


__all__ = ["InMemoryTaskRepository", "InMemoryDependencyRepository", "InMemoryAssignmentRepository"]
