from __future__ import annotations

import math

from core.domain import Task

DEFAULT_DURATION_DAYS = 5
HOURS_PER_DAY = 8.0


def task_duration_days(
    task: Task,
    *,
    default_days: int = DEFAULT_DURATION_DAYS,
    hours_per_day: float = HOURS_PER_DAY,
) -> int:
    """
    Whole-day duration of a task:
    - planned start and end present -> inclusive day span
    - else estimated hours present  -> hours / hours_per_day, rounded up
    - else                          -> default_days
    Never less than one day.
    """
    if task.planned_start is not None and task.planned_end is not None:
        days = (task.planned_end - task.planned_start).days + 1
    elif task.estimated_hours is not None:
        days = math.ceil(float(task.estimated_hours) / hours_per_day)
    else:
        days = default_days
    return max(1, int(days))


__all__ = ["DEFAULT_DURATION_DAYS", "HOURS_PER_DAY", "task_duration_days"]
