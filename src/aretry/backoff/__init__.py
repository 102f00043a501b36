r"""Wait schedules for the retry policies.

This package provides the strategies computing how long to wait before
each retry: constant, exponential and Fibonacci backoff.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fibonacci import FibonacciBackoff
