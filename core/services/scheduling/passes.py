from __future__ import annotations

from typing import Dict

from core.domain import TaskId
from core.services.scheduling.graph import DependencyGraph


def run_forward_pass(
    graph: DependencyGraph,
    durations: Dict[TaskId, int],
) -> tuple[Dict[TaskId, int], Dict[TaskId, int], int]:
    es: Dict[TaskId, int] = {}
    ef: Dict[TaskId, int] = {}

    for task_id in graph.order:
        preds = graph.predecessors[task_id]
        # start tasks (no predecessors) open at day 0
        start = max((ef[p] for p in preds), default=0)
        es[task_id] = start
        ef[task_id] = start + durations[task_id]

    project_end = max(ef.values(), default=0)
    return es, ef, project_end


def run_backward_pass(
    graph: DependencyGraph,
    durations: Dict[TaskId, int],
    project_end: int,
) -> tuple[Dict[TaskId, int], Dict[TaskId, int]]:
    ls: Dict[TaskId, int] = {}
    lf: Dict[TaskId, int] = {}

    for task_id in reversed(graph.order):
        succs = graph.successors[task_id]
        finish = min((ls[s] for s in succs), default=project_end)
        lf[task_id] = finish
        ls[task_id] = finish - durations[task_id]

    return ls, lf


__all__ = ["run_forward_pass", "run_backward_pass"]
