r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_FIBONACCI_OFFSET


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    The first two delays are ``offset`` and every following delay is the
    sum of the two previous ones: offset, offset, 2 * offset,
    3 * offset, 5 * offset, 8 * offset, ...

    Args:
        offset: The first delay in seconds (default: 0.1). Must be > 0.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> FibonacciBackoff(offset=1.0).schedule(7)
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0, 13.0]

        ```
    """

    def __init__(self, offset: float = DEFAULT_FIBONACCI_OFFSET) -> None:
        if offset <= 0:
            msg = f"offset must be > 0, got {offset}"
            raise ValueError(msg)
        self.offset = offset

    @staticmethod
    def fibonacci(n: int) -> int:
        """Return the n-th term of 1, 1, 2, 3, 5, ... (0-indexed).

        Args:
            n: The index of the term. Negative indices return 0.

        Returns:
            The n-th term.
        """
        if n < 0:
            return 0
        previous, current = 0, 1
        for _ in range(n):
            previous, current = current, previous + current
        return current

    def calculate(self, attempt: int) -> float:
        return self.offset * self.fibonacci(attempt)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(offset={self.offset})"
