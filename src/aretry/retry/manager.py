r"""Callback manager for orchestrating retry lifecycle events.

This module provides the CallbackManager class that builds the callback
information objects and invokes the user-defined callbacks.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING

from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo

if TYPE_CHECKING:
    from aretry.retry.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attempts are passed 0-indexed, the callbacks receive them 1-indexed.

    Attributes:
        callbacks: Configuration containing the callback functions.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_retry(
        self, attempt: int, max_attempts: int, wait_time: float, error: Exception
    ) -> None:
        """Invoke the on_retry callback.

        Args:
            attempt: The attempt that failed (0-indexed).
            max_attempts: Maximum number of attempts.
            wait_time: The wait before the next attempt.
            error: The failure of the attempt.
        """
        if self.callbacks.on_retry is not None:
            self.callbacks.on_retry(
                RetryInfo(
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    wait_time=wait_time,
                    error=error,
                )
            )

    def on_success(self, attempt: int, max_attempts: int, start_time: float) -> None:
        """Invoke the on_success callback.

        Args:
            attempt: The attempt that succeeded (0-indexed).
            max_attempts: Maximum number of attempts.
            start_time: ``time.monotonic()`` when the loop started.
        """
        if self.callbacks.on_success is not None:
            self.callbacks.on_success(
                SuccessInfo(
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    total_time=time.monotonic() - start_time,
                )
            )

    def on_failure(
        self,
        attempt: int,
        max_attempts: int,
        error: Exception,
        start_time: float,
        exhausted: bool = True,
    ) -> None:
        """Invoke the on_failure callback.

        Args:
            attempt: The last attempt (0-indexed).
            max_attempts: Maximum number of attempts.
            error: The primary failure about to be raised.
            start_time: ``time.monotonic()`` when the loop started.
            exhausted: ``False`` if the loop stopped on a non-retryable
                failure.
        """
        if self.callbacks.on_failure is not None:
            self.callbacks.on_failure(
                FailureInfo(
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    error=error,
                    total_time=time.monotonic() - start_time,
                    exhausted=exhausted,
                )
            )
