r"""Retry decision logic for classifying failures.

This module provides the RetryDecider class that decides whether a
failure of the work is transient (retry it) or not (propagate it now).
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a failure should be retried.

    A failure is not retried when it is an instance of one of the
    non-retryable classes, or when the ``retry_if`` predicate returns
    ``False`` for it. Every other failure is transient.

    Args:
        non_retryable: Exception classes that must not be retried.
        retry_if: Optional custom predicate. It receives the failure and
            returns ``True`` if it should be retried.

    Example:
        ```pycon
        >>> from aretry.retry import RetryDecider
        >>> decider = RetryDecider(non_retryable=[KeyError])
        >>> decider.should_retry(ValueError("boom"))
        (True, 'ValueError')
        >>> decider.should_retry(KeyError("missing"))
        (False, 'KeyError is non-retryable')

        ```
    """

    def __init__(
        self,
        non_retryable: Iterable[type[Exception]] = (),
        retry_if: Callable[[Exception], bool] | None = None,
    ) -> None:
        self.non_retryable = tuple(non_retryable)
        self.retry_if = retry_if

    def should_retry(self, exception: Exception) -> tuple[bool, str]:
        """Determine if a failure should trigger a retry.

        Args:
            exception: The failure to evaluate.

        Returns:
            Tuple of (should_retry, reason).
        """
        name = type(exception).__name__
        if self.non_retryable and isinstance(exception, self.non_retryable):
            logger.debug(f"{name} is registered as non-retryable")
            return (False, f"{name} is non-retryable")
        if self.retry_if is not None and not self.retry_if(exception):
            logger.debug(f"retry_if returned False for {name}")
            return (False, "retry_if returned False")
        return (True, name)
