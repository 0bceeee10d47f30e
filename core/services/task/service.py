from __future__ import annotations

import logging

from core.domain import DependencyType, TaskDependency, TaskId
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.interfaces import DependencyRepository, TaskRepository
from core.services.task.cascade import TaskDependencyCascadeMixin
from core.services.task.validation import TaskDependencyValidationMixin

logger = logging.getLogger(__name__)


class TaskDependencyService(
    TaskDependencyValidationMixin,
    TaskDependencyCascadeMixin,
):
    def __init__(
        self,
        task_repo: TaskRepository,
        dependency_repo: DependencyRepository,
    ):
        self._task_repo: TaskRepository = task_repo
        self._dependency_repo: DependencyRepository = dependency_repo

    def add_dependency(
        self,
        predecessor_id: TaskId,
        successor_id: TaskId,
        dependency_type: DependencyType = DependencyType.FINISH_TO_START,
        lag_days: int = 0,
        allow_date_conflict: bool = False,
    ) -> TaskDependency:
        check = self.validate_dependency(predecessor_id, successor_id, dependency_type)
        if not check.is_valid:
            if check.code == "TASK_NOT_FOUND":
                raise NotFoundError(check.summary, code=check.code)
            if check.code == "DEPENDENCY_CYCLE":
                raise BusinessRuleError(check.summary, code=check.code)
            if not (allow_date_conflict and check.code == "DEPENDENCY_DATE_CONFLICT"):
                raise ValidationError(check.summary, code=check.code)

        dep = TaskDependency.create(predecessor_id, successor_id, dependency_type, lag_days)
        self._dependency_repo.add(dep)
        logger.info(
            "Added dependency %s: %s -> %s (%s, lag %s)",
            dep.id,
            predecessor_id,
            successor_id,
            dependency_type.value,
            lag_days,
        )
        return dep

    def remove_dependency(self, dependency_id: str) -> None:
        self._dependency_repo.delete(dependency_id)
        logger.info("Removed dependency %s", dependency_id)


__all__ = ["TaskDependencyService"]
