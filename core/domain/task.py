from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import DependencyType, TaskPriority, TaskStatus
from core.domain.identifiers import TaskId, generate_id


@dataclass
class Task:
    id: TaskId
    project_id: str
    name: str
    description: str = ""
    planned_start: Optional[date] = None
    planned_end: Optional[date] = None
    estimated_hours: Optional[float] = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: TaskPriority = TaskPriority.MEDIUM
    location: Optional[str] = None

    @staticmethod
    def create(project_id: str, name: str, description: str = "", **extra) -> "Task":
        return Task(
            id=generate_id(),
            project_id=project_id,
            name=name,
            description=description,
            **extra,
        )


@dataclass
class TaskAssignment:
    id: str
    task_id: TaskId
    resource_id: str

    @staticmethod
    def create(task_id: TaskId, resource_id: str) -> "TaskAssignment":
        return TaskAssignment(id=generate_id(), task_id=task_id, resource_id=resource_id)


@dataclass
class TaskDependency:
    id: str
    predecessor_task_id: TaskId
    successor_task_id: TaskId
    dependency_type: DependencyType = DependencyType.FINISH_TO_START
    lag_days: int = 0

    @staticmethod
    def create(
        predecessor_id: TaskId,
        successor_id: TaskId,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
        lag_days: int = 0,
    ) -> "TaskDependency":
        return TaskDependency(
            id=generate_id(),
            predecessor_task_id=predecessor_id,
            successor_task_id=successor_id,
            dependency_type=dependency_type,
            lag_days=lag_days,
        )


__all__ = ["Task", "TaskAssignment", "TaskDependency"]
