r"""Fibonacci retry policy."""

from __future__ import annotations

__all__ = ["FibonacciRetryPolicy"]

from typing import TYPE_CHECKING, Any

from aretry.backoff.fibonacci import FibonacciBackoff
from aretry.config import DEFAULT_FIBONACCI_OFFSET, DEFAULT_MAX_FIB
from aretry.policy.base import BaseRetryPolicy
from aretry.utils.validation import (
    validate_attempt_limit,
    validate_duration,
    validate_positive,
)

if TYPE_CHECKING:
    from datetime import timedelta


class FibonacciRetryPolicy(BaseRetryPolicy):
    """Retry policy whose waits follow the Fibonacci sequence.

    The first two waits are ``offset`` and each following wait is the sum
    of the two previous ones. The work is invoked up to ``max_fib``
    times.

    Args:
        offset: The first wait, in seconds or as a ``timedelta``
            (default: 100 milliseconds).
        max_fib: Maximum number of invocations (default: 10).
        **kwargs: Options of ``BaseRetryPolicy`` (``non_retryable``,
            ``retry_if``, ``max_wait_time``, callbacks, ``sleep``,
            ``executor``).

    Raises:
        ValueError: If ``offset`` is missing or not strictly positive, or
            ``max_fib`` is not a strictly positive integer.

    Example:
        ```pycon
        >>> from aretry import FibonacciRetryPolicy
        >>> policy = FibonacciRetryPolicy(offset=1.0, max_fib=6)
        >>> policy.backoff_strategy.schedule(policy.max_attempts - 1)
        [1.0, 1.0, 2.0, 3.0, 5.0]

        ```
    """

    def __init__(
        self,
        offset: float | timedelta = DEFAULT_FIBONACCI_OFFSET,
        max_fib: int = DEFAULT_MAX_FIB,
        **kwargs: Any,
    ) -> None:
        self.offset = validate_duration(offset, "offset")
        validate_positive(self.offset, "offset")
        validate_attempt_limit(max_fib, "max_fib")
        self.max_fib = max_fib
        super().__init__(
            max_attempts=max_fib,
            backoff_strategy=FibonacciBackoff(offset=self.offset),
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(offset={self.offset}, max_fib={self.max_fib})"
