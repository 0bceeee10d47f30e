from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from core.domain import Task, TaskDependency, TaskId
from core.exceptions import CyclicDependencyError

logger = logging.getLogger(__name__)

DependencyEdge = Union[TaskDependency, Tuple[TaskId, TaskId]]


@dataclass
class DependencyGraph:
    order: List[TaskId]
    predecessors: Dict[TaskId, List[TaskId]] = field(default_factory=dict)
    successors: Dict[TaskId, List[TaskId]] = field(default_factory=dict)

    def start_ids(self) -> List[TaskId]:
        return [task_id for task_id in self.order if not self.predecessors[task_id]]

    def end_ids(self) -> List[TaskId]:
        return [task_id for task_id in self.order if not self.successors[task_id]]


def edge_ids(edge: DependencyEdge) -> Tuple[TaskId, TaskId]:
    if isinstance(edge, TaskDependency):
        return edge.predecessor_task_id, edge.successor_task_id
    predecessor_id, successor_id = edge
    return predecessor_id, successor_id


def build_dependency_graph(
    tasks_by_id: Mapping[TaskId, Task],
    edges: Iterable[DependencyEdge],
) -> DependencyGraph:
    """
    Adjacency plus a Kahn ordering of the task network.

    Ready tasks are released first-in first-out, seeded in input order, so the
    ordering is stable for identical input. Edges naming a task outside
    ``tasks_by_id`` are dropped; repeated edges count once.
    """
    predecessors: Dict[TaskId, List[TaskId]] = {task_id: [] for task_id in tasks_by_id}
    successors: Dict[TaskId, List[TaskId]] = {task_id: [] for task_id in tasks_by_id}

    for edge in edges:
        pred_id, succ_id = edge_ids(edge)
        if pred_id not in tasks_by_id or succ_id not in tasks_by_id:
            logger.warning("Ignoring dependency %s -> %s: unknown task id", pred_id, succ_id)
            continue
        if succ_id in successors[pred_id]:
            continue
        successors[pred_id].append(succ_id)
        predecessors[succ_id].append(pred_id)

    indegree: Dict[TaskId, int] = {task_id: len(preds) for task_id, preds in predecessors.items()}
    ready = deque(task_id for task_id in tasks_by_id if indegree[task_id] == 0)

    order: List[TaskId] = []
    while ready:
        task_id = ready.popleft()
        order.append(task_id)
        for succ_id in successors[task_id]:
            indegree[succ_id] -= 1
            if indegree[succ_id] == 0:
                ready.append(succ_id)

    if len(order) != len(tasks_by_id):
        ordered = set(order)
        blocked = [task_id for task_id in tasks_by_id if task_id not in ordered]
        raise CyclicDependencyError(
            "Cannot schedule project: circular dependency detected involving tasks "
            + ", ".join(str(task_id) for task_id in blocked)
            + ".",
            task_ids=blocked,
        )

    return DependencyGraph(order=order, predecessors=predecessors, successors=successors)


__all__ = ["DependencyEdge", "DependencyGraph", "build_dependency_graph", "edge_ids"]
