from __future__ import annotations

import math
from typing import Callable

from core.domain import TaskLocation

DistanceMetric = Callable[[TaskLocation, TaskLocation], float]

EARTH_RADIUS_KM = 6371.0088


def euclidean_distance(origin: TaskLocation, destination: TaskLocation) -> float:
    """Straight-line distance in map units."""
    return math.hypot(destination.x - origin.x, destination.y - origin.y)


def haversine_distance(origin: TaskLocation, destination: TaskLocation) -> float:
    """Great-circle distance in kilometres; x is longitude, y is latitude, both in degrees."""
    lat1, lat2 = math.radians(origin.y), math.radians(destination.y)
    d_lat = lat2 - lat1
    d_lon = math.radians(destination.x - origin.x)
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


__all__ = ["DistanceMetric", "EARTH_RADIUS_KM", "euclidean_distance", "haversine_distance"]
