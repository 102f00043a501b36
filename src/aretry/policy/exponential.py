r"""Exponential retry policy."""

from __future__ import annotations

__all__ = ["ExponentialRetryPolicy"]

from typing import Any

from aretry.backoff.exponential import ExponentialBackoff
from aretry.config import (
    DEFAULT_EXPONENTIAL_BASE,
    DEFAULT_EXPONENTIAL_UNIT,
    DEFAULT_MAX_EXPONENT,
)
from aretry.policy.base import BaseRetryPolicy
from aretry.utils.validation import validate_attempt_limit, validate_positive


class ExponentialRetryPolicy(BaseRetryPolicy):
    """Retry policy with exponentially growing waits.

    The wait before retry ``i`` (1-indexed) is ``base ** i``
    milliseconds, and retries stop once ``i`` would exceed
    ``max_exponent``. The work is therefore invoked up to
    ``max_exponent + 1`` times and the last wait is
    ``base ** max_exponent`` milliseconds. With the defaults the waits are
    10ms, 100ms, 1s and 10s.

    Args:
        base: The base of the exponentiation (default: 10).
        max_exponent: The exponent of the last wait (default: 4).
        **kwargs: Options of ``BaseRetryPolicy`` (``non_retryable``,
            ``retry_if``, ``max_wait_time``, callbacks, ``sleep``,
            ``executor``).

    Raises:
        ValueError: If ``base`` is not strictly positive, or
            ``max_exponent`` is not a strictly positive integer.

    Example:
        ```pycon
        >>> from aretry import ExponentialRetryPolicy
        >>> policy = ExponentialRetryPolicy(base=2, max_exponent=3)
        >>> policy.max_attempts
        4
        >>> policy.backoff_strategy.schedule(3)
        [0.002, 0.004, 0.008]

        ```
    """

    def __init__(
        self,
        base: float = DEFAULT_EXPONENTIAL_BASE,
        max_exponent: int = DEFAULT_MAX_EXPONENT,
        **kwargs: Any,
    ) -> None:
        validate_positive(base, "base")
        validate_attempt_limit(max_exponent, "max_exponent")
        self.base = base
        self.max_exponent = max_exponent
        super().__init__(
            max_attempts=max_exponent + 1,
            backoff_strategy=ExponentialBackoff(base=base, unit=DEFAULT_EXPONENTIAL_UNIT),
            **kwargs,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base={self.base}, "
            f"max_exponent={self.max_exponent})"
        )
