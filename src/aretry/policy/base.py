r"""Base class of the retry policies.

A retry policy is an immutable configuration (attempt budget, wait
schedule and failure classification) plus the operations running a work
under that configuration, synchronously or asynchronously.
"""

from __future__ import annotations

__all__ = ["BaseRetryPolicy"]

import copy
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.utils.validation import validate_duration
from aretry.utils.worker import submit

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable
    from concurrent.futures import Executor, Future
    from datetime import timedelta

    from aretry.backoff.base import BaseBackoffStrategy
    from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo

T = TypeVar("T")
PolicyT = TypeVar("PolicyT", bound="BaseRetryPolicy")

logger: logging.Logger = logging.getLogger(__name__)


class BaseRetryPolicy(ABC):
    """Base class of the retry policies.

    Subclasses validate their own parameters and pass the attempt budget
    and the wait schedule to this constructor. The configuration is
    captured once in a frozen ``RetryConfig``; every ``perform*`` call
    creates its own attempt loop, so a policy can be shared by threads
    and reused as many times as needed.

    When the policy gives up, the first failure of the loop is raised
    unchanged. The failures of the later attempts are attached to it
    and can be read with ``aretry.get_suppressed``.

    Args:
        max_attempts: Maximum number of invocations of the work.
        backoff_strategy: The wait schedule between two attempts.
        non_retryable: Exception classes that are never retried.
        retry_if: Optional predicate returning ``True`` if a failure
            should be retried. Use it to classify failures by an error
            code rather than by class.
        max_wait_time: Optional cap on each wait, in seconds or as a
            ``timedelta``.
        on_retry: Optional callback invoked before each retry.
        on_success: Optional callback invoked when the work succeeds.
        on_failure: Optional callback invoked when the policy gives up.
        sleep: The blocking sleep called between two attempts, e.g. an
            ``InterruptibleSleep``. Defaults to ``time.sleep``.
        executor: The executor running the ``*_async`` methods. Defaults
            to a shared bounded thread pool.
    """

    def __init__(
        self,
        *,
        max_attempts: int,
        backoff_strategy: BaseBackoffStrategy,
        non_retryable: Iterable[type[Exception]] = (),
        retry_if: Callable[[Exception], bool] | None = None,
        max_wait_time: float | timedelta | None = None,
        on_retry: Callable[[RetryInfo], None] | None = None,
        on_success: Callable[[SuccessInfo], None] | None = None,
        on_failure: Callable[[FailureInfo], None] | None = None,
        sleep: Callable[[float], None] | None = None,
        executor: Executor | None = None,
    ) -> None:
        if max_wait_time is not None:
            max_wait_time = validate_duration(max_wait_time, "max_wait_time")
        self._retry_config = RetryConfig(
            max_attempts=max_attempts,
            backoff_strategy=backoff_strategy,
            non_retryable=frozenset(non_retryable),
            retry_if=retry_if,
            max_wait_time=max_wait_time,
        )
        self._callback_config = CallbackConfig(
            on_retry=on_retry, on_success=on_success, on_failure=on_failure
        )
        self._sleep = sleep
        self._executor = executor

    @property
    def max_attempts(self) -> int:
        """Maximum number of invocations of the work."""
        return self._retry_config.max_attempts

    @property
    def backoff_strategy(self) -> BaseBackoffStrategy:
        """The wait schedule between two attempts."""
        return self._retry_config.backoff_strategy

    @property
    def non_retryable(self) -> frozenset[type[Exception]]:
        """Exception classes that are never retried."""
        return self._retry_config.non_retryable

    @property
    def max_wait_time(self) -> float | None:
        """The cap on each wait in seconds, or None."""
        return self._retry_config.max_wait_time

    @property
    def retry_config(self) -> RetryConfig:
        """The frozen retry configuration of the policy."""
        return self._retry_config

    def non_retry_exceptions(self: PolicyT, *kinds: type[Exception]) -> PolicyT:
        """Return a copy of the policy with a new non-retryable set.

        The new set replaces the current one: calling the method again
        discards the kinds registered before. The policy itself is left
        unchanged, so loops already running with it are not affected.

        Args:
            *kinds: Exception classes that must not be retried.

        Returns:
            A new policy with the same parameters and the given
            non-retryable set.

        Raises:
            ValueError: If one of the kinds is not an exception class.

        Example:
            ```pycon
            >>> from aretry import FixedDelayRetryPolicy
            >>> policy = FixedDelayRetryPolicy(duration=0.0).non_retry_exceptions(KeyError)
            >>> policy.non_retryable
            frozenset({<class 'KeyError'>})
            >>> policy.non_retry_exceptions(ValueError).non_retryable
            frozenset({<class 'ValueError'>})

            ```
        """
        policy = copy.copy(self)
        policy._retry_config = self._retry_config.merge(non_retryable=frozenset(kinds))
        return policy

    def perform(self, work: Callable[[], Any]) -> None:
        """Run a side-effecting work with automatic retry.

        Args:
            work: A zero-argument callable. Its return value is ignored.

        Raises:
            Exception: The first failure of the work, if a non-retryable
                failure occurs or all attempts fail.
            InvalidWorkError: If ``work`` is not callable.
        """
        self.perform_and_get(work)

    def perform_and_get(self, work: Callable[[], T]) -> T:
        """Run a value-producing work with automatic retry.

        Args:
            work: A zero-argument callable.

        Returns:
            The value returned by the successful invocation. It is
            ``None`` only if the work itself returned ``None``.

        Raises:
            Exception: The first failure of the work, if a non-retryable
                failure occurs or all attempts fail.
            InvalidWorkError: If ``work`` is not callable.
        """
        return self._create_executor().execute(work)

    def perform_async(self, work: Callable[[], Any]) -> Future[None]:
        """Run ``perform`` on a worker thread.

        The call returns at once. Failures are never raised on the
        calling thread: they are delivered through the returned future.

        Args:
            work: A zero-argument callable.

        Returns:
            A future resolving to ``None`` or to the failure ``perform``
            would raise.
        """
        return submit(self.perform, work, executor=self._executor)

    def perform_and_get_async(self, work: Callable[[], T]) -> Future[T]:
        """Run ``perform_and_get`` on a worker thread.

        Args:
            work: A zero-argument callable.

        Returns:
            A future resolving to the value of the work or to the
            failure ``perform_and_get`` would raise.

        Example:
            ```pycon
            >>> from aretry import OneShotRetryPolicy
            >>> future = OneShotRetryPolicy().perform_and_get_async(lambda: "done")
            >>> future.result()
            'done'

            ```
        """
        return submit(self.perform_and_get, work, executor=self._executor)

    async def aperform(self, work: Callable[[], Awaitable[Any]]) -> None:
        """Await a side-effecting coroutine function with automatic retry.

        Args:
            work: A zero-argument coroutine function.

        Raises:
            Exception: The first failure of the work, if a non-retryable
                failure occurs or all attempts fail.
            InvalidWorkError: If ``work`` does not return an awaitable.
        """
        await self.aperform_and_get(work)

    async def aperform_and_get(self, work: Callable[[], Awaitable[T]]) -> T:
        """Await a value-producing coroutine function with automatic
        retry.

        The waits use ``asyncio.sleep``, so the event loop is never
        blocked.

        Args:
            work: A zero-argument coroutine function.

        Returns:
            The value returned by the successful invocation.

        Raises:
            Exception: The first failure of the work, if a non-retryable
                failure occurs or all attempts fail.
            InvalidWorkError: If ``work`` does not return an awaitable.
        """
        executor = AsyncRetryExecutor(self._retry_config, self._callback_config)
        return await executor.execute(work)

    def _create_executor(self) -> RetryExecutor:
        return RetryExecutor(self._retry_config, self._callback_config, sleep=self._sleep)

    @abstractmethod
    def __repr__(self) -> str:
        """Return the policy with its parameters."""
