import logging
import sys

import pytest

from core.exceptions import ValidationError
from core.services.routing import RouteSettings
from core.services.scheduling import SchedulingSettings
from infra.operational_support import bind_trace_id, create_incident_id, current_trace_id
from infra.services import build_services
from infra.settings import load_route_settings, load_scheduling_settings
from infra.version import get_app_version


def test_defaults_without_overrides():
    assert load_route_settings({}) == RouteSettings()
    assert load_scheduling_settings({}) == SchedulingSettings()
    assert RouteSettings().distance_units_per_mile == 50.0
    assert SchedulingSettings().default_duration_days == 5


def test_env_overrides_are_applied():
    route = load_route_settings({
        "PM_ROUTE_UNITS_PER_MILE": "25",
        "PM_ROUTE_MINUTES_PER_MILE": "0",
        "PM_ROUTE_SERVICE_MINUTES": "45",
    })
    assert route == RouteSettings(distance_units_per_mile=25.0, minutes_per_mile=0.0, service_minutes_per_stop=45.0)

    sched = load_scheduling_settings({"PM_DEFAULT_TASK_DAYS": "2", "PM_HOURS_PER_DAY": "7.5"})
    assert sched.default_duration_days == 2
    assert sched.hours_per_day == 7.5


def test_settings_read_process_environment(monkeypatch):
    monkeypatch.setenv("PM_DEFAULT_TASK_DAYS", "4")
    assert load_scheduling_settings().default_duration_days == 4


@pytest.mark.parametrize(
    "env",
    [
        {"PM_ROUTE_UNITS_PER_MILE": "fast"},
        {"PM_ROUTE_UNITS_PER_MILE": "0"},
        {"PM_ROUTE_SERVICE_MINUTES": "-5"},
        {"PM_ROUTE_UNITS_PER_MILE": "inf"},
        {"PM_ROUTE_MINUTES_PER_MILE": "nan"},
    ],
)
def test_invalid_route_settings_are_rejected(env):
    with pytest.raises(ValidationError) as exc:
        load_route_settings(env)
    assert exc.value.code == "INVALID_SETTING"


@pytest.mark.parametrize(
    "env",
    [
        {"PM_DEFAULT_TASK_DAYS": "1.5"},
        {"PM_HOURS_PER_DAY": "nan"},
        {"PM_HOURS_PER_DAY": "-inf"},
    ],
)
def test_invalid_scheduling_settings_are_rejected(env):
    with pytest.raises(ValidationError) as exc:
        load_scheduling_settings(env)
    assert exc.value.code == "INVALID_SETTING"


def test_non_finite_hours_never_reach_the_engine():
    with pytest.raises(ValidationError) as exc:
        build_services(env={"PM_HOURS_PER_DAY": "nan"})
    assert exc.value.code == "INVALID_SETTING"


def test_default_task_days_flow_into_the_engine(make_task):
    services = build_services(env={"PM_DEFAULT_TASK_DAYS": "2"})
    services["task_repo"].add(make_task("A"))

    nodes = services["scheduling_service"].compute_project_schedule("P1")
    assert nodes["A"].duration == 2


def test_app_version_override(monkeypatch):
    monkeypatch.setenv("PM_APP_VERSION", "9.9.9")
    assert get_app_version() == "9.9.9"
    monkeypatch.delenv("PM_APP_VERSION")
    assert get_app_version() == "1.0.0"
    monkeypatch.setenv("PM_APP_VERSION", "   ")
    assert get_app_version() == "1.0.0"


def test_trace_id_binding_is_scoped():
    assert current_trace_id() is None
    with bind_trace_id("inc-test") as trace_id:
        assert trace_id == "inc-test"
        assert current_trace_id() == "inc-test"
    assert current_trace_id() is None

    with bind_trace_id() as generated:
        assert generated.startswith("inc-")
    assert create_incident_id() != create_incident_id()


def test_setup_logging_writes_trace_ids(tmp_path, monkeypatch):
    import infra.operational_support as operational_support
    from infra.logging_config import setup_logging

    monkeypatch.setattr(operational_support, "_HOOKS_INSTALLED", True)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(tmp_path / "logs")
        with bind_trace_id("inc-test"):
            logging.getLogger("core.services.scheduling").info("schedule computed")
        for handler in root.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert log_file.parent == tmp_path / "logs"
        assert "Logging initialized" in text
        assert "trace=inc-test core.services.scheduling - schedule computed" in text
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")
def test_log_dir_follows_xdg_data_home(tmp_path, monkeypatch):
    from infra.path import APP_NAME, default_log_dir, user_data_dir

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert user_data_dir().parent.parent == tmp_path
    assert user_data_dir().name == APP_NAME
    assert default_log_dir() == user_data_dir() / "logs"
