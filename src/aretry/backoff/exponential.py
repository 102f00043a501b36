r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_EXPONENTIAL_BASE, DEFAULT_EXPONENTIAL_UNIT


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    The delay before retry ``i`` (1-indexed) is ``base ** i`` time units.
    With the defaults (base 10, unit of one millisecond) the delays are
    10ms, 100ms, 1s, 10s, and so on. Use the ``max_wait_time`` option of
    the policies to cap the delays.

    Args:
        base: The base of the exponentiation (default: 10.0). Must be > 0.
        unit: The length in seconds of one time unit (default: 0.001,
            i.e. the delays are expressed in milliseconds). Must be > 0.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base=2.0, unit=1.0)
        >>> backoff.calculate(0)  # 2 ** 1
        2.0
        >>> backoff.calculate(3)  # 2 ** 4
        16.0

        ```
    """

    def __init__(
        self,
        base: float = DEFAULT_EXPONENTIAL_BASE,
        unit: float = DEFAULT_EXPONENTIAL_UNIT,
    ) -> None:
        if base <= 0:
            msg = f"base must be > 0, got {base}"
            raise ValueError(msg)
        if unit <= 0:
            msg = f"unit must be > 0, got {unit}"
            raise ValueError(msg)

        self.base = base
        self.unit = unit

    def calculate(self, attempt: int) -> float:
        """Calculate the exponential delay.

        Args:
            attempt: The retry number (0-indexed).

        Returns:
            ``unit * base ** (attempt + 1)``.
        """
        return self.unit * self.base ** (attempt + 1)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base={self.base}, unit={self.unit})"
