r"""Utility functions shared by the retry policies.

This package provides the sleep collaborators, wait time calculation,
parameter validation, the bounded worker pool used by the async methods,
and opt-in structured logging.
"""

from __future__ import annotations

__all__ = [
    "InterruptibleSleep",
    "calculate_sleep_time",
    "sleep",
    "submit",
    "validate_attempt_limit",
    "validate_duration",
    "validate_exception_kinds",
    "validate_positive",
]

from aretry.utils.sleep import InterruptibleSleep, calculate_sleep_time, sleep
from aretry.utils.validation import (
    validate_attempt_limit,
    validate_duration,
    validate_exception_kinds,
    validate_positive,
)
from aretry.utils.worker import submit
