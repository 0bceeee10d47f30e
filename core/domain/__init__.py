from core.domain.enums import DependencyType, LayoutMode, TaskPriority, TaskStatus
from core.domain.identifiers import TaskId, generate_id, task_id_sort_key
from core.domain.location import TaskLocation
from core.domain.task import Task, TaskAssignment, TaskDependency

__all__ = [
    "generate_id",
    "task_id_sort_key",
    "TaskId",
    "TaskStatus",
    "TaskPriority",
    "DependencyType",
    "LayoutMode",
    "Task",
    "TaskAssignment",
    "TaskDependency",
    "TaskLocation",
]
