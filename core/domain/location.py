from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.task import Task


@dataclass(eq=False)
class TaskLocation:
    """
    A stop on a field-service route.

    Compared by identity: two stops at the same coordinates are still two stops.
    A depot built without a task carries only a label.
    """

    task: Optional[Task]
    x: float
    y: float
    address: Optional[str] = None
    label: str = ""
    order_index: int = -1
    visited: bool = False

    def __post_init__(self) -> None:
        if self.task is not None:
            if self.address is None:
                self.address = self.task.location
            if not self.label:
                self.label = self.task.name

    @property
    def task_id(self):
        return self.task.id if self.task is not None else None


__all__ = ["TaskLocation"]
