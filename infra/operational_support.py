from __future__ import annotations

import logging
import sys
import threading
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator

_TRACE_ID_CTX: ContextVar[str | None] = ContextVar("pm_trace_id", default=None)

logger = logging.getLogger(__name__)


def create_incident_id() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"inc-{stamp}-{uuid.uuid4().hex[:8]}"


def current_trace_id() -> str | None:
    value = _TRACE_ID_CTX.get()
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


@contextmanager
def bind_trace_id(trace_id: str | None = None) -> Iterator[str]:
    """Tags every log record emitted inside the block with one trace id."""
    normalized = (trace_id or "").strip() or create_incident_id()
    token = _TRACE_ID_CTX.set(normalized)
    try:
        yield normalized
    finally:
        _TRACE_ID_CTX.reset(token)


class TraceIdLogFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


_HOOKS_INSTALLED = False


def install_global_exception_hooks() -> None:
    """Routes uncaught exceptions (main and worker threads) into the log before the default hooks run."""
    global _HOOKS_INSTALLED
    if _HOOKS_INSTALLED:
        return

    previous_sys_hook = sys.excepthook

    def _sys_hook(exc_type: type[BaseException], exc_value: BaseException, exc_tb: Any) -> None:
        logger.critical(
            "Unhandled exception in main-thread",
            exc_info=(exc_type, exc_value, exc_tb),
        )
        previous_sys_hook(exc_type, exc_value, exc_tb)

    sys.excepthook = _sys_hook

    previous_thread_hook = getattr(threading, "excepthook", None)
    if previous_thread_hook is not None:

        def _thread_hook(args: Any) -> None:
            thread_name = getattr(getattr(args, "thread", None), "name", "worker-thread")
            logger.critical(
                "Unhandled exception in thread:%s",
                thread_name,
                exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
            )
            previous_thread_hook(args)

        threading.excepthook = _thread_hook

    _HOOKS_INSTALLED = True


__all__ = [
    "TraceIdLogFilter",
    "bind_trace_id",
    "create_incident_id",
    "current_trace_id",
    "install_global_exception_hooks",
]
