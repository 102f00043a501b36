r"""Retry policies.

This package provides the retry policies: fixed-delay, exponential,
Fibonacci and one-shot.
"""

from __future__ import annotations

__all__ = [
    "BaseRetryPolicy",
    "ExponentialRetryPolicy",
    "FibonacciRetryPolicy",
    "FixedDelayRetryPolicy",
    "OneShotRetryPolicy",
]

from aretry.policy.base import BaseRetryPolicy
from aretry.policy.exponential import ExponentialRetryPolicy
from aretry.policy.fibonacci import FibonacciRetryPolicy
from aretry.policy.fixed import FixedDelayRetryPolicy
from aretry.policy.one_shot import OneShotRetryPolicy
