from __future__ import annotations

from dataclasses import dataclass

from core.domain import DependencyType, TaskId


@dataclass
class DependencyCheck:
    is_valid: bool
    code: str
    summary: str
    predecessor_task_id: TaskId
    successor_task_id: TaskId
    dependency_type: DependencyType = DependencyType.FINISH_TO_START


__all__ = ["DependencyCheck"]
