r"""Synchronous retry executor.

This module provides the RetryExecutor class that drives the attempt
loop of the retry policies.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.retry.config import CallbackConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import (
    log_attempt_failure,
    prepare_primary_failure,
    validate_work,
)
from aretry.retry.manager import CallbackManager
from aretry.utils.sleep import calculate_sleep_time
from aretry.utils.sleep import sleep as default_sleep

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.retry.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Invokes a work until it succeeds or the policy gives up.

    The executor holds no per-call state: the attempt counter and the
    accumulated failures live in ``execute``, so each call gets a fresh
    attempt budget and one executor can serve concurrent calls.

    Args:
        retry_config: Retry configuration.
        callback_config: Optional callback configuration.
        sleep: The blocking sleep called between two attempts.
            Defaults to ``aretry.utils.sleep.sleep``.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> from aretry.retry import RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(
        ...     RetryConfig(max_attempts=3, backoff_strategy=ConstantBackoff(0.0))
        ... )
        >>> executor.execute(lambda: 42)
        42

        ```
    """

    def __init__(
        self,
        retry_config: RetryConfig,
        callback_config: CallbackConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.config = retry_config
        self.decider = RetryDecider(retry_config.non_retryable, retry_config.retry_if)
        self.callbacks = CallbackManager(callback_config or CallbackConfig())
        self.sleep = sleep or default_sleep

    def execute(self, work: Callable[[], T]) -> T:
        """Invoke the work with automatic retry.

        The work is invoked at most ``max_attempts`` times. A failure
        classified as non-retryable stops the loop at once, without
        waiting. There is no wait after the last attempt.

        Args:
            work: A zero-argument callable.

        Returns:
            The value returned by the successful invocation.

        Raises:
            Exception: The first failure of the loop, if a non-retryable
                failure occurs or all attempts fail. The later failures
                are attached to it (see ``aretry.exceptions.get_suppressed``).
            InvalidWorkError: If ``work`` is not callable.
        """
        validate_work(work)
        max_attempts = self.config.max_attempts
        start_time = time.monotonic()
        errors: list[Exception] = []
        reason: str | None = None

        for attempt in range(max_attempts):
            logger.debug(f"Attempt {attempt + 1}/{max_attempts}")
            try:
                result = work()
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)
                should_retry, why = self.decider.should_retry(exc)
                if not should_retry:
                    reason = why
                    break
            else:
                self.callbacks.on_success(attempt, max_attempts, start_time)
                return result

            if attempt + 1 < max_attempts:
                wait_time = calculate_sleep_time(
                    attempt, self.config.backoff_strategy, self.config.max_wait_time
                )
                log_attempt_failure(errors[-1], attempt, max_attempts, wait_time)
                self.callbacks.on_retry(attempt, max_attempts, wait_time, errors[-1])
                self.sleep(wait_time)

        error = prepare_primary_failure(errors, max_attempts, reason)
        self.callbacks.on_failure(
            len(errors) - 1, max_attempts, error, start_time, exhausted=reason is None
        )
        raise error
