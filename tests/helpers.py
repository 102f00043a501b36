r"""Shared test helpers: fake works and an elapsed-time measurement."""

from __future__ import annotations

__all__ = ["AsyncFlakyWork", "FlakyWork", "Stopwatch"]

import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


class FlakyWork:
    """Work raising the given failures, then returning ``result``.

    Args:
        failures: The exceptions raised by the first invocations.
        result: The value returned once the failures are consumed.
    """

    def __init__(self, failures: Iterable[Exception] = (), result: Any = None) -> None:
        self.failures = list(failures)
        self.result = result
        self.calls = 0
        self.call_times: list[float] = []

    def __call__(self) -> Any:
        self.call_times.append(time.monotonic())
        self.calls += 1
        if self.calls <= len(self.failures):
            raise self.failures[self.calls - 1]
        return self.result

    def gaps(self) -> list[float]:
        """Return the elapsed times between two consecutive invocations."""
        return [b - a for a, b in zip(self.call_times, self.call_times[1:])]


class AsyncFlakyWork(FlakyWork):
    """Coroutine counterpart of ``FlakyWork``."""

    async def __call__(self) -> Any:
        return super().__call__()


class Stopwatch:
    """Measure the elapsed time of a block.

    Example:
        ```pycon
        >>> from tests.helpers import Stopwatch
        >>> with Stopwatch() as watch:
        ...     pass
        ...
        >>> watch.elapsed >= 0
        True

        ```
    """

    def __init__(self) -> None:
        self.start = 0.0
        self.stop = 0.0

    def __enter__(self) -> Stopwatch:
        self.start = time.monotonic()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop = time.monotonic()

    @property
    def elapsed(self) -> float:
        return self.stop - self.start
