r"""Retry package implementing the attempt loop.

Public API:
    - RetryConfig: Configuration for retry behavior
    - CallbackConfig: Configuration for callbacks
    - RetryDecider: Classification of failures into retryable or not
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
]

from aretry.retry.config import CallbackConfig, RetryConfig
from aretry.retry.decider import RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.manager import CallbackManager
