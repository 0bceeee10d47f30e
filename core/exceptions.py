# core/exceptions.py
from __future__ import annotations

from typing import Iterable


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class CyclicDependencyError(BusinessRuleError):
    """Raised when the task network contains a dependency cycle."""
    def __init__(self, message: str, *, task_ids: Iterable[object] = (), code: str = "SCHEDULE_CYCLE"):
        super().__init__(message, code=code)
        self.task_ids = list(task_ids)
