r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that retries
coroutine functions, waiting with ``asyncio.sleep`` so other tasks run
while the loop backs off.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.exceptions import InvalidWorkError
from aretry.retry.config import CallbackConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import (
    check_awaitable,
    log_attempt_failure,
    prepare_primary_failure,
    validate_work,
)
from aretry.retry.manager import CallbackManager
from aretry.utils.sleep import calculate_sleep_time

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.retry.config import RetryConfig

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Awaits a coroutine function until it succeeds or the policy gives
    up.

    Same semantics as ``RetryExecutor``: at most ``max_attempts``
    invocations, immediate stop on a non-retryable failure, no wait after
    the last attempt. Cancelling the task cancels the current attempt or
    wait.

    Args:
        retry_config: Retry configuration.
        callback_config: Optional callback configuration.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.backoff import ConstantBackoff
        >>> from aretry.retry import AsyncRetryExecutor, RetryConfig
        >>> async def fetch() -> str:
        ...     return "data"
        ...
        >>> executor = AsyncRetryExecutor(
        ...     RetryConfig(max_attempts=3, backoff_strategy=ConstantBackoff(0.0))
        ... )
        >>> asyncio.run(executor.execute(fetch))
        'data'

        ```
    """

    def __init__(
        self,
        retry_config: RetryConfig,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.config = retry_config
        self.decider = RetryDecider(retry_config.non_retryable, retry_config.retry_if)
        self.callbacks = CallbackManager(callback_config or CallbackConfig())

    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        """Await the work with automatic retry.

        Args:
            work: A zero-argument coroutine function, or any callable
                returning an awaitable.

        Returns:
            The value returned by the successful invocation.

        Raises:
            Exception: The first failure of the loop, if a non-retryable
                failure occurs or all attempts fail.
            InvalidWorkError: If ``work`` is not callable or does not
                return an awaitable. It is never retried.
        """
        validate_work(work)
        max_attempts = self.config.max_attempts
        start_time = time.monotonic()
        errors: list[Exception] = []
        reason: str | None = None

        for attempt in range(max_attempts):
            logger.debug(f"Attempt {attempt + 1}/{max_attempts}")
            try:
                result = await check_awaitable(work(), work)
            except InvalidWorkError:
                raise
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
                await asyncio.sleep(wait_time)

        error = prepare_primary_failure(errors, max_attempts, reason)
        self.callbacks.on_failure(
            len(errors) - 1, max_attempts, error, start_time, exhausted=reason is None
        )
        raise error
