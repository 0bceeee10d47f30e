from __future__ import annotations

import math
import random
from typing import List, Sequence

from core.domain import Task, TaskLocation, TaskPriority, TaskStatus
from core.interfaces import Geocoder

DEPOT_LABEL = "Office/Warehouse"
DEPOT_ADDRESS = "Main Office"

DEMO_STOPS = (
    ("123 Main St", "Install Equipment"),
    ("456 Oak Ave", "Maintenance Check"),
    ("789 Pine Rd", "Repair HVAC"),
    ("321 Elm St", "Safety Inspection"),
    ("654 Maple Dr", "Equipment Upgrade"),
)


class MockGeocoder(Geocoder):
    """
    Deterministic stand-in for address geocoding.

    ``locate`` places a task at a random bearing and a radius between
    ``min_radius`` and ``max_radius`` around the centre. The RNG is seeded
    from the geocoder seed and the task id on every call, so a task lands on
    the same point no matter how often or in which batch it is located.
    """

    def __init__(
        self,
        seed: int = 42,
        center: tuple[float, float] = (400.0, 400.0),
        min_radius: float = 50.0,
        max_radius: float = 300.0,
    ):
        self._seed = seed
        self._center = center
        self._min_radius = min_radius
        self._max_radius = max_radius

    def depot(self) -> TaskLocation:
        cx, cy = self._center
        return TaskLocation(task=None, x=cx, y=cy, address=DEPOT_ADDRESS, label=DEPOT_LABEL)

    def locate(self, task: Task) -> TaskLocation:
        x, y = self._random_point(random.Random(f"{self._seed}:{task.id}"))
        return TaskLocation(task=task, x=x, y=y)

    def locate_all(self, tasks: Sequence[Task]) -> List[TaskLocation]:
        return [self.locate(task) for task in tasks]

    def demo_locations(self, project_id: str) -> List[TaskLocation]:
        rng = random.Random(self._seed)
        locations: List[TaskLocation] = []
        priorities = list(TaskPriority)
        for index, (address, title) in enumerate(DEMO_STOPS, start=1):
            task = Task(
                id=f"demo-{index}",
                project_id=project_id,
                name=title,
                location=address,
                priority=rng.choice(priorities),
                status=TaskStatus.NOT_STARTED,
            )
            locations.append(self.locate(task))
        return locations

    def _random_point(self, rng: random.Random) -> tuple[float, float]:
        angle = rng.random() * 2 * math.pi
        radius = self._min_radius + rng.random() * (self._max_radius - self._min_radius)
        cx, cy = self._center
        return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


__all__ = ["DEPOT_ADDRESS", "DEPOT_LABEL", "DEMO_STOPS", "MockGeocoder"]
