r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy is the wait schedule of a retry policy: a pure
    function from the retry number to the delay inserted before that
    retry. Strategies hold no per-call state, so one instance can be
    shared by concurrent attempt loops.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before a given retry.

        Args:
            attempt: The retry number (0-indexed). For example,
                attempt=0 is the wait between the first and the second
                invocation of the work.

        Returns:
            The delay in seconds.
        """

    def schedule(self, retries: int) -> list[float]:
        """Return the delays of the first ``retries`` retries.

        Args:
            retries: The number of retries.

        Returns:
            The delays in seconds, in order.

        Example:
            ```pycon
            >>> from aretry.backoff import ConstantBackoff
            >>> ConstantBackoff(delay=0.5).schedule(3)
            [0.5, 0.5, 0.5]

            ```
        """
        return [self.calculate(attempt) for attempt in range(retries)]
