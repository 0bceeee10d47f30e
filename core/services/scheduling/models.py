from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.domain import Task, TaskId
from core.services.scheduling.duration import DEFAULT_DURATION_DAYS, HOURS_PER_DAY


@dataclass(frozen=True)
class SchedulingSettings:
    default_duration_days: int = DEFAULT_DURATION_DAYS
    hours_per_day: float = HOURS_PER_DAY


@dataclass
class TaskNode:
    task: Task
    duration: int
    earliest_start: int = 0
    earliest_finish: int = 0
    latest_start: int = 0
    latest_finish: int = 0
    slack: int = 0
    is_critical: bool = False
    level: int = 0
    x: float = 0.0
    y: float = 0.0

    @property
    def task_id(self) -> TaskId:
        return self.task.id


@dataclass
class CriticalPathSummary:
    total_tasks: int
    critical_tasks: int
    critical_percentage: float
    project_duration_days: int
    critical_path: List[TaskId] = field(default_factory=list)
    chains: List[List[TaskId]] = field(default_factory=list)
    project_id: Optional[str] = None


__all__ = ["SchedulingSettings", "TaskNode", "CriticalPathSummary"]
