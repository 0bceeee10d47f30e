from __future__ import annotations

from typing import List, Optional, Sequence

from core.domain import TaskLocation
from core.services.routing.geometry import DistanceMetric, euclidean_distance
from core.services.routing.models import RouteLeg, RouteSettings, RouteSummary


def summarize_route(
    route: Sequence[TaskLocation],
    depot: Optional[TaskLocation] = None,
    settings: RouteSettings | None = None,
    metric: DistanceMetric = euclidean_distance,
) -> RouteSummary:
    settings = settings or RouteSettings()

    legs: List[RouteLeg] = []
    for origin, destination in zip(route, route[1:]):
        units = metric(origin, destination)
        miles = units / settings.distance_units_per_mile
        legs.append(
            RouteLeg(
                origin=origin,
                destination=destination,
                distance_units=units,
                miles=miles,
                travel_minutes=miles * settings.minutes_per_mile,
            )
        )

    stop_count = sum(1 for location in route if location is not depot)
    total_units = sum(leg.distance_units for leg in legs)
    return RouteSummary(
        legs=legs,
        stop_count=stop_count,
        total_distance_units=total_units,
        total_miles=total_units / settings.distance_units_per_mile,
        travel_hours=sum(leg.travel_minutes for leg in legs) / 60.0,
        service_hours=stop_count * settings.service_minutes_per_stop / 60.0,
    )


__all__ = ["summarize_route"]
