r"""Exceptions and failure bookkeeping of the retry policies.

When a retry policy gives up, it raises the first failure of the attempt
loop (the primary failure) itself, so callers catch the exception types
raised by their own work. The failures of the following attempts are
attached to the primary failure as suppressed failures: they are listed
in the ``suppressed`` attribute and summarized in the exception notes.
"""

from __future__ import annotations

__all__ = ["InvalidWorkError", "add_suppressed", "get_suppressed"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class InvalidWorkError(ValueError):
    """Exception raised when the work given to a policy cannot be run.

    The work must be a zero-argument callable, and for the coroutine
    methods it must return an awaitable. This is a configuration error:
    it is raised on the first invocation and never retried.
    """


def add_suppressed(error: BaseException, suppressed: Iterable[BaseException]) -> None:
    """Attach secondary failures to a primary failure.

    The failures are appended to the ``suppressed`` attribute of
    ``error`` and one note is added per failure. The primary failure
    itself is skipped, so a work raising the same exception instance at
    every attempt does not suppress itself.

    Args:
        error: The primary failure.
        suppressed: The failures that happened after the primary one.

    Example:
        ```pycon
        >>> from aretry.exceptions import add_suppressed, get_suppressed
        >>> error = ValueError("first")
        >>> add_suppressed(error, [KeyError("second"), error])
        >>> get_suppressed(error)
        (KeyError('second'),)
        >>> error.__notes__
        ["Suppressed: KeyError: 'second'"]

        ```
    """
    others = tuple(exc for exc in suppressed if exc is not error)
    if not others:
        return
    error.suppressed = get_suppressed(error) + others  # type: ignore[attr-defined]
    for exc in others:
        error.add_note(f"Suppressed: {type(exc).__name__}: {exc}")


def get_suppressed(error: BaseException) -> tuple[BaseException, ...]:
    """Return the failures suppressed by a primary failure.

    Args:
        error: The failure raised by a retry policy.

    Returns:
        The suppressed failures in the order they occurred, or an empty
        tuple if there are none.
    """
    return getattr(error, "suppressed", ())
