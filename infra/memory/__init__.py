from infra.memory.repositories import (
    InMemoryAssignmentRepository,
    InMemoryDependencyRepository,
    InMemoryTaskRepository,
)

__all__ = ["InMemoryTaskRepository", "InMemoryDependencyRepository", "InMemoryAssignmentRepository"]
