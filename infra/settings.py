from __future__ import annotations

import math
import os
from dataclasses import replace
from typing import Mapping

from core.exceptions import ValidationError
from core.services.routing import RouteSettings
from core.services.scheduling import SchedulingSettings

ENV_UNITS_PER_MILE = "PM_ROUTE_UNITS_PER_MILE"
ENV_MINUTES_PER_MILE = "PM_ROUTE_MINUTES_PER_MILE"
ENV_SERVICE_MINUTES = "PM_ROUTE_SERVICE_MINUTES"
ENV_DEFAULT_TASK_DAYS = "PM_DEFAULT_TASK_DAYS"
ENV_HOURS_PER_DAY = "PM_HOURS_PER_DAY"


def _read_positive(env: Mapping[str, str], key: str, cast, *, allow_zero: bool = False):
    raw = (env.get(key) or "").strip()
    if not raw:
        return None
    try:
        value = cast(raw)
    except ValueError:
        raise ValidationError(f"{key} must be a number, got {raw!r}.", code="INVALID_SETTING") from None
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        raise ValidationError(f"{key} must be a finite number greater than zero, got {raw!r}.", code="INVALID_SETTING")
    return value


def load_route_settings(env: Mapping[str, str] | None = None) -> RouteSettings:
    env = os.environ if env is None else env
    overrides = {}
    units = _read_positive(env, ENV_UNITS_PER_MILE, float)
    if units is not None:
        overrides["distance_units_per_mile"] = units
    minutes = _read_positive(env, ENV_MINUTES_PER_MILE, float, allow_zero=True)
    if minutes is not None:
        overrides["minutes_per_mile"] = minutes
    service = _read_positive(env, ENV_SERVICE_MINUTES, float, allow_zero=True)
    if service is not None:
        overrides["service_minutes_per_stop"] = service
    return replace(RouteSettings(), **overrides)


def load_scheduling_settings(env: Mapping[str, str] | None = None) -> SchedulingSettings:
    env = os.environ if env is None else env
    overrides = {}
    days = _read_positive(env, ENV_DEFAULT_TASK_DAYS, int)
    if days is not None:
        overrides["default_duration_days"] = days
    hours = _read_positive(env, ENV_HOURS_PER_DAY, float)
    if hours is not None:
        overrides["hours_per_day"] = hours
    return replace(SchedulingSettings(), **overrides)


__all__ = ["load_route_settings", "load_scheduling_settings"]
