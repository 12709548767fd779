"""Structured logging helpers for fieldcheck."""

from __future__ import annotations

import logging
import os
import uuid
from contextvars import ContextVar
from typing import Optional

LOG_LEVEL_ENV_VAR = "FIELDCHECK_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
NO_CORRELATION_ID = "-"

_ROOT_LOGGER = "fieldcheck"
_request_id: ContextVar[str | None] = ContextVar("fieldcheck_request_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the id of the request being validated."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def resolve_log_level(level: int | str | None = None) -> int:
    """
    Resolve a logging level from an explicit value or ``FIELDCHECK_LOG_LEVEL``.
    """
    source = "level"
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR)
        source = LOG_LEVEL_ENV_VAR
        if level is None or not level.strip():
            return logging.INFO
    if isinstance(level, int):
        return level
    normalized = level.strip()
    if normalized.isdigit():
        return int(normalized)
    resolved = logging.getLevelName(normalized.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"{source} must be a logging level name or number, got {level!r}.")
    return resolved


def configure_logging(level: int | str | None = None) -> None:
    """
    Attach the package handler once.

    An explicit bad ``level`` raises ``ValueError``. A bad
    ``FIELDCHECK_LOG_LEVEL`` falls back to ``INFO`` with a warning so that
    importing or constructing validators never fails on it.
    """
    package_logger = logging.getLogger(_ROOT_LOGGER)
    if package_logger.handlers:
        return
    env_problem = None
    if level is None:
        try:
            resolved = resolve_log_level()
        except ValueError as exc:
            resolved = logging.INFO
            env_problem = str(exc)
    else:
        resolved = resolve_log_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved)
    if env_problem is not None:
        package_logger.warning("Ignoring %s: %s Using INFO.", LOG_LEVEL_ENV_VAR, env_problem)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    request_id = value or uuid.uuid4().hex
    _request_id.set(request_id)
    return request_id


def get_correlation_id() -> str:
    return _request_id.get() or NO_CORRELATION_ID
