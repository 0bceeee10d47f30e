from datetime import date

import pytest

from core.domain import DependencyType, TaskDependency
from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.services.task import dates_compatible, successor_start_date


def _dated(make_task, task_id, start, end):
    return make_task(task_id, start=start, end=end)


def test_validation_codes(services, make_task):
    repo = services["task_repo"]
    dep_service = services["dependency_service"]
    repo.add(_dated(make_task, "A", date(2024, 1, 1), date(2024, 1, 3)))
    repo.add(_dated(make_task, "B", date(2024, 1, 4), date(2024, 1, 6)))
    repo.add(_dated(make_task, "C", date(2024, 1, 2), date(2024, 1, 2)))

    assert dep_service.validate_dependency("A", "A").code == "DEPENDENCY_SELF"
    assert dep_service.validate_dependency("A", "missing").code == "TASK_NOT_FOUND"
    assert dep_service.validate_dependency("missing", "A").code == "TASK_NOT_FOUND"
    assert dep_service.validate_dependency("B", "C").code == "DEPENDENCY_DATE_CONFLICT"

    ok = dep_service.validate_dependency("A", "B")
    assert ok.is_valid and ok.code == "OK"

    dep_service.add_dependency("A", "B")
    cycle = dep_service.validate_dependency("B", "A", DependencyType.START_TO_START)
    assert not cycle.is_valid
    assert cycle.code == "DEPENDENCY_CYCLE"
    assert "B -> A -> B" in cycle.summary


def test_add_dependency_raises_by_kind(services, make_task):
    repo = services["task_repo"]
    dep_service = services["dependency_service"]
    for task_id in ("A", "B"):
        repo.add(make_task(task_id, 1))

    with pytest.raises(ValidationError) as exc:
        dep_service.add_dependency("A", "A")
    assert exc.value.code == "DEPENDENCY_SELF"

    with pytest.raises(NotFoundError) as exc:
        dep_service.add_dependency("A", "Z")
    assert exc.value.code == "TASK_NOT_FOUND"

    dep_service.add_dependency("A", "B")
    with pytest.raises(BusinessRuleError) as exc:
        dep_service.add_dependency("B", "A")
    assert exc.value.code == "DEPENDENCY_CYCLE"


def test_date_conflict_can_be_allowed(services, make_task):
    repo = services["task_repo"]
    dep_service = services["dependency_service"]
    repo.add(_dated(make_task, "A", date(2024, 1, 1), date(2024, 1, 3)))
    repo.add(_dated(make_task, "B", date(2024, 1, 2), date(2024, 1, 4)))

    with pytest.raises(ValidationError) as exc:
        dep_service.add_dependency("A", "B")
    assert exc.value.code == "DEPENDENCY_DATE_CONFLICT"

    dep = dep_service.add_dependency("A", "B", allow_date_conflict=True)
    assert isinstance(dep, TaskDependency)
    assert services["dependency_repo"].list_by_predecessor("A") == [dep]


def test_remove_dependency(services, make_task):
    repo = services["task_repo"]
    dep_service = services["dependency_service"]
    repo.add(make_task("A", 1))
    repo.add(make_task("B", 1))
    dep = dep_service.add_dependency("A", "B")

    dep_service.remove_dependency(dep.id)
    assert services["dependency_repo"].list_by_project("P1") == []

    with pytest.raises(NotFoundError) as exc:
        dep_service.remove_dependency(dep.id)
    assert exc.value.code == "DEPENDENCY_NOT_FOUND"


def test_dates_compatible_per_link_type(make_task):
    pred = _dated(make_task, "P", date(2024, 1, 5), date(2024, 1, 10))
    succ = _dated(make_task, "S", date(2024, 1, 6), date(2024, 1, 12))

    assert not dates_compatible(pred, succ, DependencyType.FINISH_TO_START)
    assert dates_compatible(pred, succ, DependencyType.START_TO_START)
    assert dates_compatible(pred, succ, DependencyType.FINISH_TO_FINISH)
    assert dates_compatible(pred, succ, DependencyType.START_TO_FINISH)
    assert dates_compatible(pred, make_task("U", 1), DependencyType.FINISH_TO_START)


def test_cascade_moves_successors_downstream(services, make_task):
    repo = services["task_repo"]
    dep_service = services["dependency_service"]
    repo.add(_dated(make_task, "A", date(2024, 1, 1), date(2024, 1, 3)))
    repo.add(_dated(make_task, "B", date(2024, 1, 2), date(2024, 1, 4)))
    repo.add(_dated(make_task, "C", date(2024, 1, 1), date(2024, 1, 2)))
    dep_service.add_dependency("A", "B", allow_date_conflict=True)
    dep_service.add_dependency(
        "B", "C", DependencyType.START_TO_START, lag_days=2, allow_date_conflict=True
    )

    updated = dep_service.cascade_dates("A")

    assert [t.id for t in updated] == ["B", "C"]
    b, c = repo.get("B"), repo.get("C")
    assert (b.planned_start, b.planned_end) == (date(2024, 1, 4), date(2024, 1, 6))
    assert (c.planned_start, c.planned_end) == (date(2024, 1, 6), date(2024, 1, 7))

    assert dep_service.cascade_dates("A") == []


def test_cascade_skips_undated_predecessors(services, make_task):
    repo = services["task_repo"]
    repo.add(make_task("A", 2))
    repo.add(_dated(make_task, "B", date(2024, 1, 2), date(2024, 1, 4)))
    services["dependency_service"].add_dependency("A", "B")

    assert services["dependency_service"].cascade_dates("A") == []
    assert repo.get("B").planned_start == date(2024, 1, 2)


def test_successor_start_for_finish_and_start_to_finish(make_task):
    pred = _dated(make_task, "P", date(2024, 1, 5), date(2024, 1, 10))

    ff = TaskDependency.create("P", "S", DependencyType.FINISH_TO_FINISH)
    succ = _dated(make_task, "S", date(2024, 1, 1), date(2024, 1, 4))
    assert successor_start_date(pred, succ, ff) == date(2024, 1, 7)

    sf = TaskDependency.create("P", "S", DependencyType.START_TO_FINISH, lag_days=1)
    succ = _dated(make_task, "S", date(2024, 1, 1), date(2024, 1, 3))
    assert successor_start_date(pred, succ, sf) == date(2024, 1, 4)

    ss = TaskDependency.create("P", "S", DependencyType.START_TO_START, lag_days=3)
    assert successor_start_date(pred, make_task("S", 1), ss) == date(2024, 1, 8)
    assert successor_start_date(pred, make_task("S", 1), ff) is None
