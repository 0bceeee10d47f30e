from __future__ import annotations

from typing import Dict

from core.domain import TaskId
from core.services.scheduling.graph import DependencyGraph


def assign_levels(graph: DependencyGraph) -> Dict[TaskId, int]:
    """Column index per task: 0 for start tasks, one past the deepest predecessor otherwise."""
    levels: Dict[TaskId, int] = {}
    for task_id in graph.order:
        preds = graph.predecessors[task_id]
        levels[task_id] = max((levels[p] + 1 for p in preds), default=0)
    return levels


__all__ = ["assign_levels"]
