from .geocoder import MockGeocoder
from .geometry import euclidean_distance, haversine_distance
from .models import RouteLeg, RoutePlan, RouteSettings, RouteSummary
from .sequencer import optimize_route
from .service import RoutePlanningService
from .summary import summarize_route

__all__ = [
    "MockGeocoder",
    "RouteLeg",
    "RoutePlan",
    "RoutePlanningService",
    "RouteSettings",
    "RouteSummary",
    "euclidean_distance",
    "haversine_distance",
    "optimize_route",
    "summarize_route",
]
