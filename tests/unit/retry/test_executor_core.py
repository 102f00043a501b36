r"""Unit tests for the helpers shared by the retry executors."""

from __future__ import annotations

import asyncio

import pytest

from aretry.exceptions import InvalidWorkError, get_suppressed
from aretry.retry.executor_core import (
    check_awaitable,
    prepare_primary_failure,
    validate_work,
)

###################################
#     Tests for validate_work     #
###################################


def test_validate_work_callable() -> None:
    validate_work(lambda: None)


@pytest.mark.parametrize("work", [None, 1, "work"])
def test_validate_work_not_callable(work: object) -> None:
    with pytest.raises(InvalidWorkError, match=r"work must be a callable"):
        validate_work(work)


#####################################
#     Tests for check_awaitable     #
#####################################


def test_check_awaitable_coroutine() -> None:
    async def work() -> int:
        return 1

    coroutine = work()
    assert check_awaitable(coroutine, work) is coroutine
    assert asyncio.run(coroutine) == 1


@pytest.mark.parametrize("result", [None, "value", 42])
def test_check_awaitable_plain_value(result: object) -> None:
    with pytest.raises(InvalidWorkError, match=r"must be a coroutine function"):
        check_awaitable(result, print)


#############################################
#     Tests for prepare_primary_failure     #
#############################################


def test_prepare_primary_failure_exhausted() -> None:
    errors = [ValueError("a"), OSError("b"), ValueError("c")]
    error = prepare_primary_failure(errors, max_attempts=3)

    assert error is errors[0]
    assert get_suppressed(error) == (errors[1], errors[2])
    assert error.__notes__ == [
        "Suppressed: OSError: b",
        "Suppressed: ValueError: c",
        "Gave up after 3 attempts (max_attempts=3)",
    ]


def test_prepare_primary_failure_not_retried() -> None:
    errors = [KeyError("k")]
    error = prepare_primary_failure(errors, max_attempts=5, reason="KeyError is non-retryable")

    assert error is errors[0]
    assert get_suppressed(error) == ()
    assert error.__notes__ == ["Not retried on attempt 1/5 (KeyError is non-retryable)"]
