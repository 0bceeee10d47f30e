# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain import Task, TaskAssignment, TaskDependency, TaskId, TaskLocation


class TaskRepository(ABC):
    @abstractmethod
    def add(self, task: Task) -> None: ...

    @abstractmethod
    def update(self, task: Task) -> None: ...

    @abstractmethod
    def get(self, task_id: TaskId) -> Optional[Task]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Task]: ...


class DependencyRepository(ABC):
    @abstractmethod
    def add(self, dependency: TaskDependency) -> None: ...

    @abstractmethod
    def delete(self, dependency_id: str) -> None: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[TaskDependency]: ...

    @abstractmethod
    def list_by_predecessor(self, task_id: TaskId) -> List[TaskDependency]: ...


class AssignmentRepository(ABC):
    @abstractmethod
    def add(self, assignment: TaskAssignment) -> None: ...

    @abstractmethod
    def list_by_resource(self, resource_id: str) -> List[TaskAssignment]: ...

    @abstractmethod
    def list_by_task(self, task_id: TaskId) -> List[TaskAssignment]: ...


class Geocoder(ABC):
    @abstractmethod
    def depot(self) -> TaskLocation: ...

    @abstractmethod
    def locate(self, task: Task) -> TaskLocation: ...

    def demo_locations(self, project_id: str) -> List[TaskLocation]:
        """Sample stops for a project with nothing to visit. None by default."""
        return []


__all__ = ["TaskRepository", "DependencyRepository", "AssignmentRepository", "Geocoder"]
