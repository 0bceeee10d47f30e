# tests/conftest.py
from datetime import date

import pytest

from core.domain import Task
from infra.services import build_services


@pytest.fixture
def services():
    # in-memory repositories, no environment overrides
    return build_services(env={})


@pytest.fixture
def make_task():
    def _make(task_id, days=None, project_id="P1", name=None, start=None, end=None, **extra):
        hours = None if days is None else days * 8
        return Task(
            id=task_id,
            project_id=project_id,
            name=name or f"Task {task_id}",
            estimated_hours=hours,
            planned_start=start,
            planned_end=end,
            **extra,
        )

    return _make


@pytest.fixture
def seeded_project(services, make_task):
    """A -> C, B -> C, C -> D with A on the longest branch."""
    repo = services["task_repo"]
    dep_service = services["dependency_service"]

    tasks = {
        "A": make_task("A", 5, location="1 Dock Rd", start=date(2024, 3, 4)),
        "B": make_task("B", 2, location="2 Mill Ln", start=date(2024, 3, 4)),
        "C": make_task("C", 1, location="3 Yard St", start=date(2024, 3, 5)),
        "D": make_task("D", 3),
    }
    for task in tasks.values():
        repo.add(task)
    dep_service.add_dependency("A", "C")
    dep_service.add_dependency("B", "C")
    dep_service.add_dependency("C", "D")
    return "P1", tasks
