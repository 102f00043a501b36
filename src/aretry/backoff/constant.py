r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_FIXED_DELAY


class ConstantBackoff(BaseBackoffStrategy):
    """Constant backoff strategy.

    Waits the same delay before every retry. This is the wait schedule
    of the fixed-delay and one-shot policies.

    Args:
        delay: The delay in seconds (default: 5.0).

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.calculate(0)
        2.5
        >>> backoff.calculate(10)
        2.5

        ```
    """

    def __init__(self, delay: float = DEFAULT_FIXED_DELAY) -> None:
        if delay < 0:
            msg = f"delay must be >= 0, got {delay}"
            raise ValueError(msg)
        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"
