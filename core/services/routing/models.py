from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.domain import TaskLocation


@dataclass(frozen=True)
class RouteSettings:
    distance_units_per_mile: float = 50.0
    minutes_per_mile: float = 15.0
    service_minutes_per_stop: float = 30.0


@dataclass
class RouteLeg:
    origin: TaskLocation
    destination: TaskLocation
    distance_units: float
    miles: float
    travel_minutes: float


@dataclass
class RouteSummary:
    legs: List[RouteLeg]
    stop_count: int
    total_distance_units: float
    total_miles: float
    travel_hours: float
    service_hours: float

    @property
    def total_hours(self) -> float:
        return self.travel_hours + self.service_hours


@dataclass
class RoutePlan:
    project_id: str
    depot: Optional[TaskLocation]
    stops: List[TaskLocation] = field(default_factory=list)
    route: List[TaskLocation] = field(default_factory=list)
    summary: Optional[RouteSummary] = None
    resource_id: Optional[str] = None


__all__ = ["RouteSettings", "RouteLeg", "RouteSummary", "RoutePlan"]
