r"""Sleep collaborators and wait time calculation.

This module provides the blocking sleep used between two attempts, an
interruptible variant that can be woken up from another thread, and the
helper that turns a backoff strategy into a wait time.
"""

from __future__ import annotations

__all__ = ["InterruptibleSleep", "calculate_sleep_time", "sleep"]

import logging
import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def calculate_sleep_time(
    attempt: int,
    backoff_strategy: BaseBackoffStrategy,
    max_wait_time: float | None = None,
) -> float:
    """Calculate the wait time before the next attempt.

    Args:
        attempt: The current retry number (0-indexed). For example,
            attempt=0 is the wait before the first retry.
        backoff_strategy: The strategy computing the base delay.
        max_wait_time: Optional cap in seconds on the returned delay.

    Returns:
        The wait time in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff, FibonacciBackoff
        >>> from aretry.utils.sleep import calculate_sleep_time
        >>> calculate_sleep_time(attempt=3, backoff_strategy=ConstantBackoff(delay=2.0))
        2.0
        >>> calculate_sleep_time(attempt=4, backoff_strategy=FibonacciBackoff(offset=1.0))
        5.0
        >>> calculate_sleep_time(
        ...     attempt=4, backoff_strategy=FibonacciBackoff(offset=1.0), max_wait_time=3.0
        ... )
        3.0

        ```
    """
    sleep_time = backoff_strategy.calculate(attempt)
    if max_wait_time is not None and sleep_time > max_wait_time:
        logger.debug(f"Capping sleep time from {sleep_time:.3f}s to {max_wait_time:.3f}s")
        sleep_time = max_wait_time
    logger.debug(f"Waiting {sleep_time:.3f}s before retry")
    return sleep_time


def sleep(seconds: float) -> None:
    """Block the calling thread for the given number of seconds.

    Args:
        seconds: The time to wait. Non-positive values return immediately.
    """
    if seconds > 0:
        time.sleep(seconds)


class InterruptibleSleep:
    """Blocking sleep that another thread can cut short.

    Calling ``interrupt()`` wakes up the thread currently waiting (or
    the next one to wait) without raising any error, so the retry loop
    simply moves on to its next attempt. An attempt that is already
    running is never aborted.

    Example:
        ```pycon
        >>> from aretry import FixedDelayRetryPolicy
        >>> from aretry.utils.sleep import InterruptibleSleep
        >>> sleeper = InterruptibleSleep()
        >>> policy = FixedDelayRetryPolicy(duration=60.0, max_attempts=3, sleep=sleeper)
        >>> future = policy.perform_async(lambda: None)
        >>> sleeper.interrupt()  # wakes up the policy if it is waiting

        ```
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def __call__(self, seconds: float) -> None:
        if seconds <= 0:
            return
        if self._event.wait(seconds):
            self._event.clear()
            logger.warning("Received an interrupt while sleeping")

    def interrupt(self) -> None:
        """Wake up the waiting thread."""
        self._event.set()

    @property
    def interrupted(self) -> bool:
        """``True`` if an interrupt is pending."""
        return self._event.is_set()
