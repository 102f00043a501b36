r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors to validate the work, log failed
attempts and prepare the failure raised when the loop gives up.
"""

from __future__ import annotations

__all__ = [
    "check_awaitable",
    "log_attempt_failure",
    "prepare_primary_failure",
    "validate_work",
]

import inspect
import logging
from typing import TYPE_CHECKING, Any

from aretry.exceptions import InvalidWorkError, add_suppressed
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger: logging.Logger = logging.getLogger(__name__)


def validate_work(work: object) -> None:
    """Check that the work to retry is callable.

    Args:
        work: The work passed to the executor.

    Raises:
        InvalidWorkError: If the work is missing or not callable.
    """
    if work is None or not callable(work):
        msg = f"work must be a callable, got {work!r}"
        raise InvalidWorkError(msg)


def check_awaitable(result: Any, work: object) -> Awaitable[Any]:
    """Check that a coroutine work returned something to await.

    Args:
        result: The value returned by calling the work.
        work: The work, used in the error message.

    Returns:
        The awaitable.

    Raises:
        InvalidWorkError: If the work is a plain function.
    """
    if not inspect.isawaitable(result):
        msg = (
            f"work must be a coroutine function or return an awaitable, "
            f"got {work!r} returning {result!r}"
        )
        raise InvalidWorkError(msg)
    return result


def log_attempt_failure(
    error: Exception, attempt: int, max_attempts: int, wait_time: float
) -> None:
    """Log a failed attempt that will be retried.

    Args:
        error: The failure of the attempt.
        attempt: The attempt that failed (0-indexed).
        max_attempts: Maximum number of attempts.
        wait_time: The wait before the next attempt.
    """
    log_structured(
        logger,
        logging.WARNING,
        f"Attempt {attempt + 1}/{max_attempts} failed with {type(error).__name__}: "
        f"{error}, retrying in {wait_time:.3f}s",
        attempt=attempt + 1,
        max_attempts=max_attempts,
        wait_time=wait_time,
    )


def prepare_primary_failure(
    errors: list[Exception], max_attempts: int, reason: str | None = None
) -> Exception:
    """Prepare the failure raised when the attempt loop gives up.

    The first failure is the primary failure. The later failures are
    attached to it as suppressed failures, and a note tells how the loop
    ended.

    Args:
        errors: The failures of all attempts, in order.
        max_attempts: Maximum number of attempts.
        reason: Why the last failure was not retried, or None if the
            attempt budget is exhausted.

    Returns:
        The primary failure, ready to be raised.
    """
    primary = errors[0]
    attempts = len(errors)
    if reason is None:
        summary = f"Gave up after {attempts} attempts (max_attempts={max_attempts})"
    else:
        summary = f"Not retried on attempt {attempts}/{max_attempts} ({reason})"
    logger.debug(f"{summary}: {type(primary).__name__}: {primary}")
    add_suppressed(primary, errors[1:])
    primary.add_note(summary)
    return primary
