r"""Default values for the retry policies.

The defaults are module constants so callers can reference them when
building their own policies, e.g. to double the default delay.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_EXPONENTIAL_BASE",
    "DEFAULT_EXPONENTIAL_UNIT",
    "DEFAULT_FIBONACCI_OFFSET",
    "DEFAULT_FIXED_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_EXPONENT",
    "DEFAULT_MAX_FIB",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_ONE_SHOT_DELAY",
    "ONE_SHOT_MAX_ATTEMPTS",
]

# Fixed-delay policy: wait 5 seconds between attempts, 10 attempts in total
DEFAULT_FIXED_DELAY = 5.0
DEFAULT_MAX_ATTEMPTS = 10

# Exponential policy: wait base ** i milliseconds before retry i (1-indexed)
# With the defaults the waits are 10ms, 100ms, 1s and 10s
DEFAULT_EXPONENTIAL_BASE = 10.0
DEFAULT_MAX_EXPONENT = 4
DEFAULT_EXPONENTIAL_UNIT = 0.001

# Fibonacci policy: waits are 100ms, 100ms, 200ms, 300ms, 500ms, ...
DEFAULT_FIBONACCI_OFFSET = 0.1
DEFAULT_MAX_FIB = 10

# One-shot policy: a single immediate retry
DEFAULT_ONE_SHOT_DELAY = 0.0
ONE_SHOT_MAX_ATTEMPTS = 2

# Size of the shared worker pool used by the *_async methods
DEFAULT_MAX_WORKERS = 8
