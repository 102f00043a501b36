r"""One-shot retry policy."""

from __future__ import annotations

__all__ = ["OneShotRetryPolicy"]

from typing import TYPE_CHECKING, Any

from aretry.backoff.constant import ConstantBackoff
from aretry.config import DEFAULT_ONE_SHOT_DELAY, ONE_SHOT_MAX_ATTEMPTS
from aretry.policy.base import BaseRetryPolicy
from aretry.utils.validation import validate_duration

if TYPE_CHECKING:
    from datetime import timedelta


class OneShotRetryPolicy(BaseRetryPolicy):
    """Retry policy retrying exactly once.

    The work is invoked a second time after a single wait of
    ``duration``; if it fails again the policy gives up.

    Args:
        duration: The wait before the retry, in seconds or as a
            ``timedelta`` (default: no wait).
        **kwargs: Options of ``BaseRetryPolicy`` (``non_retryable``,
            ``retry_if``, ``max_wait_time``, callbacks, ``sleep``,
            ``executor``).

    Raises:
        ValueError: If ``duration`` is missing or negative.

    Example:
        ```pycon
        >>> from aretry import OneShotRetryPolicy
        >>> policy = OneShotRetryPolicy(duration=0.5)
        >>> policy
        OneShotRetryPolicy(duration=0.5)
        >>> policy.max_attempts
        2

        ```
    """

    def __init__(self, duration: float | timedelta = DEFAULT_ONE_SHOT_DELAY, **kwargs: Any) -> None:
        self.duration = validate_duration(duration, "duration")
        super().__init__(
            max_attempts=ONE_SHOT_MAX_ATTEMPTS,
            backoff_strategy=ConstantBackoff(delay=self.duration),
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(duration={self.duration})"
