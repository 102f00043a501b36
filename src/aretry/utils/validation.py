r"""Parameter validation utilities for the retry policies.

This module provides validation functions for the parameters of the
retry policies, so invalid configurations fail when the policy is
created and never inside an attempt loop.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt_limit",
    "validate_duration",
    "validate_exception_kinds",
    "validate_positive",
]

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_duration(duration: float | timedelta | None, name: str = "duration") -> float:
    """Validate a wait duration and convert it to seconds.

    Args:
        duration: The duration in seconds, or a ``timedelta``.
        name: The parameter name used in error messages.

    Returns:
        The duration in seconds.

    Raises:
        ValueError: If the duration is missing or negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.utils.validation import validate_duration
        >>> validate_duration(1.5)
        1.5
        >>> validate_duration(timedelta(milliseconds=250))
        0.25
        >>> validate_duration(None)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: duration must not be None

        ```
    """
    if duration is None:
        msg = f"{name} must not be None"
        raise ValueError(msg)
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    elif isinstance(duration, bool) or not isinstance(duration, (int, float)):
        msg = f"{name} must be a number of seconds or a timedelta, got {duration!r}"
        raise ValueError(msg)
    else:
        seconds = float(duration)
    if seconds < 0:
        msg = f"{name} must be >= 0, got {duration}"
        raise ValueError(msg)
    return seconds


def validate_positive(value: float | None, name: str) -> None:
    """Validate that a numeric parameter is strictly positive.

    Args:
        value: The value to check.
        name: The parameter name used in error messages.

    Raises:
        ValueError: If the value is missing or not strictly positive.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_positive
        >>> validate_positive(3, "max_attempts")
        >>> validate_positive(0, "max_attempts")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be > 0, got 0

        ```
    """
    if value is None:
        msg = f"{name} must not be None"
        raise ValueError(msg)
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)


def validate_exception_kinds(
    kinds: Iterable[type[Exception]],
) -> frozenset[type[Exception]]:
    """Validate the failure kinds of a non-retryable set.

    Args:
        kinds: The exception classes that must not be retried.

    Returns:
        The exception classes as a frozenset.

    Raises:
        ValueError: If one of the kinds is not an exception class.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_exception_kinds
        >>> sorted(k.__name__ for k in validate_exception_kinds([KeyError, ValueError]))
        ['KeyError', 'ValueError']

        ```
    """
    validated = frozenset(kinds)
    for kind in validated:
        if not (isinstance(kind, type) and issubclass(kind, Exception)):
            msg = f"non-retryable kinds must be exception classes, got {kind!r}"
            raise ValueError(msg)
    return validated


def validate_attempt_limit(value: int | None, name: str) -> None:
    """Validate an attempt-like limit (attempts, exponent, Fibonacci
    index).

    The limit bounds a loop, so it must be a strictly positive integer.
    Floats (even integral ones such as ``3.0``) and booleans are rejected
    so an invalid limit fails when the policy is created rather than on
    its first run.

    Args:
        value: The limit to check.
        name: The parameter name used in error messages.

    Raises:
        ValueError: If the limit is missing, not an integer, or not
            strictly positive.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_attempt_limit
        >>> validate_attempt_limit(5, "max_attempts")
        >>> validate_attempt_limit(2.5, "max_attempts")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be an integer, got 2.5

        ```
    """
    if value is None:
        msg = f"{name} must not be None"
        raise ValueError(msg)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {value!r}"
        raise ValueError(msg)
    validate_positive(value, name)
