r"""Structured logging utilities for machine-readable log output.

This module provides a JSON formatter with consistent field names and
correlation IDs, so the retry warnings of aretry can be shipped to a log
aggregation system. It is opt-in: attach the formatter to a handler of
the ``aretry`` logger.

Example:
    Enable structured logging for aretry:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Use correlation IDs to group the attempts of one job:

    ```python
    from aretry import FixedDelayRetryPolicy
    from aretry.utils.structured_logging import clear_correlation_id, set_correlation_id

    set_correlation_id("job-123")
    try:
        FixedDelayRetryPolicy(duration=1.0).perform(run_job)
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Attributes every LogRecord has; anything else was passed with ``extra``
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-123")
        >>> get_correlation_id()
        'job-123'
        >>> clear_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID of the current context.

    The ID is stored in a context variable, so it is local to the current
    thread or asyncio task.

    Args:
        correlation_id: The correlation ID (e.g. job ID, trace ID).
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID of the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function``, ``line`` and ``thread``, plus ``correlation_id`` when set,
    ``exception`` when the record carries exception info, and any field
    passed with ``extra`` (the executors add ``attempt``,
    ``max_attempts`` and ``wait_time``).

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.warning("Attempt failed", extra={"attempt": 2})
        >>> json.loads(stream.getvalue())["attempt"]
        2

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record time as an ISO 8601 UTC timestamp."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    The fields are added to the record with ``extra``, so they appear in
    the JSON output of ``StructuredFormatter`` and are ignored by plain
    formatters.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.WARNING``).
        message: Log message.
        **extra: Structured fields to attach to the record.
    """
    logger.log(level, message, extra=extra)
