r"""Configuration dataclasses for retry behavior.

This module provides the immutable configuration objects shared by the
synchronous and asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "RetryConfig"]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from aretry.utils.validation import (
    validate_attempt_limit,
    validate_exception_kinds,
    validate_positive,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    The configuration is frozen, so one instance can be read by many
    concurrent attempt loops. Use ``merge`` to derive a new one.

    Attributes:
        max_attempts: Maximum number of invocations of the work.
        backoff_strategy: The wait schedule between two attempts.
        non_retryable: Exception classes that stop the loop immediately.
            Subclasses of a registered class are not retried either.
        retry_if: Optional predicate classifying a failure as retryable
            (``True``) or not (``False``). Consulted only for failures
            outside ``non_retryable``.
        max_wait_time: Optional cap in seconds on each wait.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> from aretry.retry import RetryConfig
        >>> config = RetryConfig(max_attempts=3, backoff_strategy=ConstantBackoff(1.0))
        >>> config.max_attempts
        3
        >>> config.merge(non_retryable=[KeyError]).non_retryable
        frozenset({<class 'KeyError'>})

        ```
    """

    max_attempts: int
    backoff_strategy: BaseBackoffStrategy
    non_retryable: frozenset[type[Exception]] = field(default_factory=frozenset)
    retry_if: Callable[[Exception], bool] | None = None
    max_wait_time: float | None = None

    def __post_init__(self) -> None:
        validate_attempt_limit(self.max_attempts, "max_attempts")
        if self.max_wait_time is not None:
            validate_positive(self.max_wait_time, "max_wait_time")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "non_retryable", validate_exception_kinds(self.non_retryable))

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with some parameters overridden.

        Only non-None overrides are applied.

        Args:
            **overrides: The parameters to override.

        Returns:
            A new, validated, ``RetryConfig``.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


@dataclass(frozen=True)
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_retry: Optional callback invoked after each failed attempt
            that will be retried.
        on_success: Optional callback invoked when the work succeeds.
        on_failure: Optional callback invoked before the final error is
            raised.
    """

    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None
