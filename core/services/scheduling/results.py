from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from core.domain import Task, TaskId
from core.services.scheduling.models import CriticalPathSummary, TaskNode


def build_task_nodes(
    tasks_by_id: Mapping[TaskId, Task],
    durations: Mapping[TaskId, int],
    es: Mapping[TaskId, int],
    ef: Mapping[TaskId, int],
    ls: Mapping[TaskId, int],
    lf: Mapping[TaskId, int],
    levels: Mapping[TaskId, int],
) -> Dict[TaskId, TaskNode]:
    result: Dict[TaskId, TaskNode] = {}

    for task_id, task in tasks_by_id.items():
        slack = ls[task_id] - es[task_id]
        result[task_id] = TaskNode(
            task=task,
            duration=durations[task_id],
            earliest_start=es[task_id],
            earliest_finish=ef[task_id],
            latest_start=ls[task_id],
            latest_finish=lf[task_id],
            slack=slack,
            is_critical=slack == 0,
            level=levels.get(task_id, 0),
        )

    return result


def critical_path_ids(nodes: Mapping[TaskId, TaskNode]) -> List[TaskId]:
    """Critical task ids in schedule order (earliest start, then input order)."""
    position = {task_id: index for index, task_id in enumerate(nodes)}
    critical = [task_id for task_id, node in nodes.items() if node.is_critical]
    return sorted(critical, key=lambda task_id: (nodes[task_id].earliest_start, position[task_id]))


def critical_chains(
    nodes: Mapping[TaskId, TaskNode],
    successors: Mapping[TaskId, Sequence[TaskId]],
) -> List[List[TaskId]]:
    """
    Splits the critical set into chains of critical tasks joined by tight
    edges (predecessor finishes exactly when the successor starts).
    Parallel zero-slack branches come out as separate chains.
    """

    def tight_next(task_id: TaskId) -> List[TaskId]:
        node = nodes[task_id]
        return [
            succ_id
            for succ_id in successors.get(task_id, ())
            if succ_id in nodes
            and nodes[succ_id].is_critical
            and nodes[succ_id].earliest_start == node.earliest_finish
        ]

    has_tight_predecessor = set()
    for task_id, node in nodes.items():
        if node.is_critical:
            has_tight_predecessor.update(tight_next(task_id))

    chains: List[List[TaskId]] = []
    for task_id in critical_path_ids(nodes):
        if task_id in has_tight_predecessor:
            continue
        stack: List[List[TaskId]] = [[task_id]]
        while stack:
            chain = stack.pop()
            following = tight_next(chain[-1])
            if not following:
                chains.append(chain)
                continue
            for succ_id in reversed(following):
                stack.append(chain + [succ_id])

    return chains


def summarize_critical_path(
    nodes: Mapping[TaskId, TaskNode],
    successors: Optional[Mapping[TaskId, Sequence[TaskId]]] = None,
    project_id: Optional[str] = None,
) -> CriticalPathSummary:
    total = len(nodes)
    path = critical_path_ids(nodes)
    percentage = (len(path) * 100.0 / total) if total > 0 else 0.0
    duration = max((node.earliest_finish for node in nodes.values()), default=0)
    chains = critical_chains(nodes, successors) if successors is not None else []
    return CriticalPathSummary(
        total_tasks=total,
        critical_tasks=len(path),
        critical_percentage=percentage,
        project_duration_days=duration,
        critical_path=path,
        chains=chains,
        project_id=project_id,
    )


__all__ = [
    "build_task_nodes",
    "critical_path_ids",
    "critical_chains",
    "summarize_critical_path",
]
