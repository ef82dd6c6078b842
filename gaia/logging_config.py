"""
Central logging configuration for Gaia.

Provides:
- Structured logging (JSON in production, human-readable in development)
- Caller correlation via contextvars (set around each unit of work)
- Environment-aware log levels

Usage:
    from gaia.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Job launched", extra={"job_id": job.id, "stack_id": stack_id})
"""

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

# Username of the caller driving the current unit of work
caller_var: ContextVar[Optional[str]] = ContextVar("caller", default=None)

_RESERVED_ATTRS = frozenset((
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "message", "taskName", "caller",
))


def get_caller() -> Optional[str]:
    """Get the current caller username from context, if set."""
    return caller_var.get()


@contextmanager
def caller_context(username: Optional[str]) -> Iterator[None]:
    """Bind a caller username to every log record emitted inside the block."""
    token = caller_var.set(username)
    try:
        yield
    finally:
        caller_var.reset(token)


class CallerFilter(logging.Filter):
    """Filter that adds the caller username to log records from context."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.caller = get_caller() or "-"  # type: ignore[attr-defined]
        return True


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for production log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        caller = getattr(record, "caller", None)
        if caller and caller != "-":
            log_obj["caller"] = caller

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Anything passed via extra= in the log call
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or value is None:
                continue
            try:
                json.dumps(value)
                log_obj[key] = value
            except (TypeError, ValueError):
                log_obj[key] = str(value)

        return json.dumps(log_obj)


def _create_dev_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] caller=%(caller)s %(message)s",
        datefmt="%H:%M:%S",
    )


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        environment: 'development' or 'production'
        debug: If True, use DEBUG level regardless of log_level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates on reconfigure
    for h in root.handlers[:]:
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(CallerFilter())

    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(_create_dev_formatter())

    root.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module name.

    Records carry the caller username when a caller_context is active.
    Use extra={} for additional structured fields:
        logger.info("Stack saved", extra={"stack_id": stack.id})
    """
    return logging.getLogger(name)
