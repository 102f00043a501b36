r"""aretry - Retry and backoff policies for unreliable work.

This package wraps a unit of work (any zero-argument callable) and
re-invokes it on failure according to a policy, optionally skipping
retry for designated failure kinds.

Key Features:
    - Four policies: fixed delay, exponential, Fibonacci and one-shot
    - Non-retryable failure kinds that propagate on first occurrence
    - Custom ``retry_if`` predicate to classify failures by error code
    - No failure is lost: the first failure is raised with the later
      ones attached
    - Immutable policies, safe to share between threads
    - Future-based async methods backed by a bounded worker pool
    - Coroutine support with ``asyncio.sleep`` between attempts
    - Callbacks for observability (on_retry, on_success, on_failure)

Example:
    ```pycon
    >>> from aretry import FibonacciRetryPolicy, FixedDelayRetryPolicy, get_suppressed
    >>> policy = FixedDelayRetryPolicy(duration=0.0, max_attempts=3)
    >>> policy.perform_and_get(lambda: "value")
    'value'
    >>> def always_fails():
    ...     raise ConnectionError("unreachable")
    ...
    >>> try:
    ...     policy.perform(always_fails)
    ... except ConnectionError as exc:
    ...     print(exc, len(get_suppressed(exc)))
    ...
    unreachable 2
    >>> future = FibonacciRetryPolicy(offset=0.01).perform_and_get_async(lambda: 42)
    >>> future.result()
    42

    ```
"""

from __future__ import annotations

__all__ = [
    "BaseRetryPolicy",
    "ExponentialRetryPolicy",
    "FibonacciRetryPolicy",
    "FixedDelayRetryPolicy",
    "InterruptibleSleep",
    "InvalidWorkError",
    "OneShotRetryPolicy",
    "__version__",
    "get_suppressed",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.exceptions import InvalidWorkError, get_suppressed
from aretry.policy import (
    BaseRetryPolicy,
    ExponentialRetryPolicy,
    FibonacciRetryPolicy,
    FixedDelayRetryPolicy,
    OneShotRetryPolicy,
)
from aretry.utils.sleep import InterruptibleSleep

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
