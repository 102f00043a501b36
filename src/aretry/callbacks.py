r"""Callback types for observing the retry lifecycle.

The retry policies accept three optional callbacks:

- on_retry: called after a failed attempt, before waiting for the next one
- on_success: called when the work succeeds
- on_failure: called when the policy gives up, before the error is raised

Callbacks are caller code: an exception raised by a callback propagates
out of the attempt loop.

Example:
    ```pycon
    >>> from aretry import FixedDelayRetryPolicy
    >>> from aretry.callbacks import RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"retry {info.attempt + 1}/{info.max_attempts} in {info.wait_time}s")
    ...
    >>> policy = FixedDelayRetryPolicy(duration=0.0, max_attempts=3, on_retry=log_retry)
    >>> calls = iter([ValueError("boom"), None])
    >>> def work():
    ...     error = next(calls)
    ...     if error is not None:
    ...         raise error
    ...
    >>> policy.perform(work)
    retry 2/3 in 0.0s

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RetryInfo", "SuccessInfo"]

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        attempt: The attempt that just failed (1-indexed).
        max_attempts: The maximum number of attempts of the policy.
        wait_time: The time in seconds waited before the next attempt.
        error: The failure of the attempt.
    """

    attempt: int
    max_attempts: int
    wait_time: float
    error: Exception


@dataclass(frozen=True)
class SuccessInfo:
    """Information passed to the on_success callback.

    Attributes:
        attempt: The attempt that succeeded (1-indexed).
        max_attempts: The maximum number of attempts of the policy.
        total_time: Time in seconds spent on all attempts and waits.
    """

    attempt: int
    max_attempts: int
    total_time: float


@dataclass(frozen=True)
class FailureInfo:
    """Information passed to the on_failure callback.

    Attributes:
        attempt: The last attempt (1-indexed).
        max_attempts: The maximum number of attempts of the policy.
        error: The primary failure about to be raised, with the later
            failures attached as suppressed failures.
        total_time: Time in seconds spent on all attempts and waits.
        exhausted: ``True`` if the attempt budget was consumed,
            ``False`` if the loop stopped on a non-retryable failure.
    """

    attempt: int
    max_attempts: int
    error: Exception
    total_time: float
    exhausted: bool = True
