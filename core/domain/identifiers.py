from __future__ import annotations

from typing import Union
from uuid import uuid4

TaskId = Union[int, str]


def generate_id() -> str:
    return str(uuid4())


def task_id_sort_key(task_id: TaskId) -> tuple[int, int, str]:
    """Orders integer ids numerically ahead of any other id, which sort as text."""
    if isinstance(task_id, int) and not isinstance(task_id, bool):
        return (0, task_id, "")
    return (1, 0, str(task_id))


__all__ = ["TaskId", "generate_id", "task_id_sort_key"]
