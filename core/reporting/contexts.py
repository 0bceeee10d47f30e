from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from core.services.routing import RoutePlan
from core.services.scheduling import CriticalPathSummary, TaskNode


@dataclass
class ScheduleExportContext:
    summary: CriticalPathSummary
    nodes: List[TaskNode]
    title: str
    as_of: date


@dataclass
class RouteExportContext:
    plan: RoutePlan
    title: str
    as_of: date
    technician: Optional[str] = None
