from .cascade import successor_start_date
from .models import DependencyCheck
from .service import TaskDependencyService
from .validation import dates_compatible

__all__ = ["DependencyCheck", "TaskDependencyService", "dates_compatible", "successor_start_date"]
