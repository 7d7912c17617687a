"""Context management for structured logging.

Fields set with ``set_log_context`` are stored in a ContextVar and injected
into every LogRecord by ``ContextInjectingFilter``. Each asyncio task gets
its own copy, so concurrent page handles never mix their context.
"""

from __future__ import annotations

from contextvars import ContextVar
import logging
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("translate_log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the logging context of the current task.

    Example:
        set_log_context(ecosystem="evm", chain="eth")
        logger.info("Fetching page")  # record carries ecosystem and chain
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    return _log_context.get().copy()


def clear_log_context() -> None:
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Logging filter that copies the current log context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
