r"""Fixed-delay retry policy."""

from __future__ import annotations

__all__ = ["FixedDelayRetryPolicy"]

from typing import TYPE_CHECKING, Any

from aretry.backoff.constant import ConstantBackoff
from aretry.config import DEFAULT_FIXED_DELAY, DEFAULT_MAX_ATTEMPTS
from aretry.policy.base import BaseRetryPolicy
from aretry.utils.validation import validate_attempt_limit, validate_duration

if TYPE_CHECKING:
    from datetime import timedelta


class FixedDelayRetryPolicy(BaseRetryPolicy):
    """Retry policy waiting the same duration between attempts.

    The work is invoked up to ``max_attempts`` times with a wait of
    ``duration`` between two attempts, so a permanently failing work
    takes ``(max_attempts - 1) * duration`` to fail.

    Args:
        duration: The wait between two attempts, in seconds or as a
            ``timedelta`` (default: 5 seconds).
        max_attempts: Maximum number of invocations (default: 10).
        **kwargs: Options of ``BaseRetryPolicy`` (``non_retryable``,
            ``retry_if``, ``max_wait_time``, callbacks, ``sleep``,
            ``executor``).

    Raises:
        ValueError: If ``duration`` is missing or negative, or
            ``max_attempts`` is not a strictly positive integer.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry import FixedDelayRetryPolicy
        >>> policy = FixedDelayRetryPolicy(duration=timedelta(seconds=1), max_attempts=5)
        >>> policy
        FixedDelayRetryPolicy(duration=1.0, max_attempts=5)
        >>> policy.perform_and_get(lambda: "value")
        'value'

        ```
    """

    def __init__(
        self,
        duration: float | timedelta = DEFAULT_FIXED_DELAY,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        **kwargs: Any,
    ) -> None:
        self.duration = validate_duration(duration, "duration")
        validate_attempt_limit(max_attempts, "max_attempts")
        super().__init__(
            max_attempts=max_attempts,
            backoff_strategy=ConstantBackoff(delay=self.duration),
            **kwargs,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(duration={self.duration}, "
            f"max_attempts={self.max_attempts})"
        )
