from __future__ import annotations

import os


_DEFAULT_APP_VERSION = "1.0.0"


def get_app_version() -> str:
    """Package version, unless ``PM_APP_VERSION`` overrides it for a deployment."""
    env_override = (os.getenv("PM_APP_VERSION") or "").strip()
    if env_override:
        return env_override
    return _DEFAULT_APP_VERSION


__all__ = ["get_app_version"]
