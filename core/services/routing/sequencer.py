from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from core.domain import TaskLocation, task_id_sort_key
from core.services.routing.geometry import DistanceMetric, euclidean_distance


def _tie_key(position: int, location: TaskLocation) -> Tuple:
    # lowest task id first; stops without a task after those, by input position
    if location.task is not None:
        return (0, task_id_sort_key(location.task.id), position)
    return (1, (0, 0, ""), position)


def optimize_route(
    locations: Sequence[TaskLocation],
    depot: Optional[TaskLocation],
    metric: DistanceMetric = euclidean_distance,
) -> List[TaskLocation]:
    """
    Greedy nearest-neighbour route.

    Starts at ``depot`` (order index 0), repeatedly moves to the closest
    unvisited stop and returns to the depot at the end. Equal distances go to
    the lowest task id. Order indexes are written onto the locations.

    With ``depot=None`` the route starts at the first location and stays open.
    ``optimize_route([], depot)`` is ``[depot]``.
    """
    seen: set[int] = set()
    candidates: List[Tuple[int, TaskLocation]] = []
    for position, location in enumerate(locations):
        location.order_index = -1
        location.visited = False
        if location is depot or id(location) in seen:
            continue
        seen.add(id(location))
        candidates.append((position, location))

    if depot is not None:
        current = depot
    elif candidates:
        _, current = candidates.pop(0)
    else:
        return []

    current.order_index = 0
    current.visited = True
    route: List[TaskLocation] = [current]

    order_index = 1
    while candidates:
        origin = current
        best = min(
            range(len(candidates)),
            key=lambda i: (metric(origin, candidates[i][1]), _tie_key(*candidates[i])),
        )
        _, nearest = candidates.pop(best)
        nearest.order_index = order_index
        nearest.visited = True
        order_index += 1
        route.append(nearest)
        current = nearest

    if depot is not None and route[-1] is not depot:
        route.append(depot)

    return route


__all__ = ["optimize_route"]
