r"""Unit tests for synchronous retry executor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from unittest.mock import Mock, call

import pytest

from aretry.backoff import ConstantBackoff, FibonacciBackoff
from aretry.exceptions import InvalidWorkError, get_suppressed
from aretry.retry import CallbackConfig, RetryConfig, RetryExecutor
from tests.helpers import FlakyWork

if TYPE_CHECKING:
    from aretry.callbacks import FailureInfo, RetryInfo, SuccessInfo


def create_executor(
    max_attempts: int = 3,
    delay: float = 1.0,
    callback_config: CallbackConfig | None = None,
    **kwargs: object,
) -> tuple[RetryExecutor, Mock]:
    sleep = Mock()
    config = RetryConfig(
        max_attempts=max_attempts, backoff_strategy=ConstantBackoff(delay), **kwargs
    )
    return RetryExecutor(config, callback_config, sleep=sleep), sleep


def test_retry_executor_creation() -> None:
    config = RetryConfig(max_attempts=3, backoff_strategy=ConstantBackoff(1.0))
    executor = RetryExecutor(config)

    assert executor.config is config
    assert executor.decider is not None
    assert executor.callbacks is not None


def test_retry_executor_successful_work() -> None:
    """Test successful work without retries."""
    executor, sleep = create_executor()
    work = Mock(return_value="value")

    assert executor.execute(work) == "value"
    work.assert_called_once_with()
    sleep.assert_not_called()


def test_retry_executor_returns_none_result() -> None:
    """Test that a work legitimately returning None is a success."""
    executor, _ = create_executor()
    assert executor.execute(Mock(return_value=None)) is None


def test_retry_executor_succeeds_on_third_of_five_attempts() -> None:
    executor, sleep = create_executor(max_attempts=5)
    work = FlakyWork(failures=[ValueError("1"), ValueError("2")], result=42)

    assert executor.execute(work) == 42
    assert work.calls == 3
    assert sleep.call_args_list == [call(1.0), call(1.0)]


@pytest.mark.parametrize("max_attempts", [1, 2, 5, 10])
def test_retry_executor_exhausts_attempts(max_attempts: int, always_failing_work: FlakyWork) -> None:
    """Test that a failing work is invoked exactly max_attempts times."""
    executor, sleep = create_executor(max_attempts=max_attempts)

    with pytest.raises(ValueError, match=r"^failure 0$") as exc_info:
        executor.execute(always_failing_work)

    assert always_failing_work.calls == max_attempts
    # waits happen between attempts, not after the last one
    assert sleep.call_count == max_attempts - 1
    assert len(get_suppressed(exc_info.value)) == max_attempts - 1
    assert exc_info.value.__notes__[-1] == (
        f"Gave up after {max_attempts} attempts (max_attempts={max_attempts})"
    )


def test_retry_executor_raises_primary_failure() -> None:
    """Test that the first failure is raised with the others attached."""
    failures = [ValueError("first"), KeyError("second"), TypeError("third")]
    executor, _ = create_executor(max_attempts=3)

    with pytest.raises(ValueError, match=r"^first$") as exc_info:
        executor.execute(FlakyWork(failures=failures))

    error = exc_info.value
    assert error is failures[0]
    assert get_suppressed(error) == (failures[1], failures[2])
    assert error.__notes__ == [
        "Suppressed: KeyError: 'second'",
        "Suppressed: TypeError: third",
        "Gave up after 3 attempts (max_attempts=3)",
    ]


def test_retry_executor_primary_failure_has_no_context() -> None:
    executor, _ = create_executor(max_attempts=2)
    failures = [ValueError("first"), ValueError("second")]

    with pytest.raises(ValueError) as exc_info:
        executor.execute(FlakyWork(failures=failures))

    assert exc_info.value.__context__ is None
    assert exc_info.value.__cause__ is None


def test_retry_executor_same_failure_every_attempt() -> None:
    failure = ValueError("always")
    executor, _ = create_executor(max_attempts=3)

    with pytest.raises(ValueError) as exc_info:
        executor.execute(FlakyWork(failures=[failure] * 3))

    assert exc_info.value is failure
    assert get_suppressed(failure) == ()


def test_retry_executor_non_retryable_failure() -> None:
    """Test that a non-retryable failure stops the loop at once."""
    executor, sleep = create_executor(max_attempts=5, non_retryable=[KeyError])
    failure = KeyError("missing")
    work = FlakyWork(failures=[failure] * 5)

    with pytest.raises(KeyError) as exc_info:
        executor.execute(work)

    assert exc_info.value is failure
    assert work.calls == 1
    sleep.assert_not_called()
    assert get_suppressed(failure) == ()
    assert failure.__notes__ == [
        "Not retried on attempt 1/5 (KeyError is non-retryable)"
    ]


def test_retry_executor_non_retryable_after_transient_failures() -> None:
    executor, sleep = create_executor(max_attempts=5, non_retryable=[KeyError])
    failures = [ValueError("transient"), KeyError("fatal")]

    with pytest.raises(ValueError, match=r"^transient$") as exc_info:
        executor.execute(FlakyWork(failures=failures))

    assert get_suppressed(exc_info.value) == (failures[1],)
    assert sleep.call_count == 1


def test_retry_executor_retry_if_false() -> None:
    executor, sleep = create_executor(max_attempts=5, retry_if=lambda exc: False)
    work = FlakyWork(failures=[ValueError()] * 5)

    with pytest.raises(ValueError) as exc_info:
        executor.execute(work)

    assert "retry_if returned False" in exc_info.value.__notes__[-1]
    assert work.calls == 1
    sleep.assert_not_called()


def test_retry_executor_uses_backoff_schedule() -> None:
    sleep = Mock()
    config = RetryConfig(max_attempts=6, backoff_strategy=FibonacciBackoff(offset=1.0))
    executor = RetryExecutor(config, sleep=sleep)

    with pytest.raises(ValueError):
        executor.execute(FlakyWork(failures=[ValueError()] * 6))

    assert [c.args[0] for c in sleep.call_args_list] == [1.0, 1.0, 2.0, 3.0, 5.0]


def test_retry_executor_max_wait_time_caps_waits() -> None:
    sleep = Mock()
    config = RetryConfig(
        max_attempts=6, backoff_strategy=FibonacciBackoff(offset=1.0), max_wait_time=2.5
    )
    executor = RetryExecutor(config, sleep=sleep)

    with pytest.raises(ValueError):
        executor.execute(FlakyWork(failures=[ValueError()] * 6))

    assert [c.args[0] for c in sleep.call_args_list] == [1.0, 1.0, 2.0, 2.5, 2.5]


def test_retry_executor_default_sleep(mock_sleep: Mock) -> None:
    """Test that the default sleep is time.sleep."""
    config = RetryConfig(max_attempts=3, backoff_strategy=ConstantBackoff(0.5))
    executor = RetryExecutor(config)

    with pytest.raises(ValueError):
        executor.execute(FlakyWork(failures=[ValueError()] * 3))

    assert mock_sleep.call_args_list == [call(0.5), call(0.5)]


def test_retry_executor_fresh_budget_per_call(always_failing_work: FlakyWork) -> None:
    """Test that the attempt counter is not carried over between calls."""
    executor, _ = create_executor(max_attempts=3)

    for expected_calls in (3, 6, 9):
        with pytest.raises(ValueError):
            executor.execute(always_failing_work)
        assert always_failing_work.calls == expected_calls


class Abort(BaseException):
    pass


def test_retry_executor_does_not_catch_base_exceptions() -> None:
    executor, sleep = create_executor(max_attempts=3)
    work = Mock(side_effect=Abort)

    with pytest.raises(Abort):
        executor.execute(work)

    work.assert_called_once()
    sleep.assert_not_called()


@pytest.mark.parametrize("work", [None, "not callable"])
def test_retry_executor_invalid_work(work: object) -> None:
    executor, _ = create_executor()
    with pytest.raises(InvalidWorkError, match=r"work must be a callable"):
        executor.execute(work)  # type: ignore[arg-type]


def test_retry_executor_callbacks() -> None:
    on_retry, on_success, on_failure = Mock(), Mock(), Mock()
    executor, _ = create_executor(
        max_attempts=3,
        callback_config=CallbackConfig(
            on_retry=on_retry, on_success=on_success, on_failure=on_failure
        ),
    )
    failure = ValueError("boom")

    assert executor.execute(FlakyWork(failures=[failure], result="ok")) == "ok"

    retry_info: RetryInfo = on_retry.call_args.args[0]
    assert (retry_info.attempt, retry_info.max_attempts) == (1, 3)
    assert retry_info.wait_time == 1.0
    assert retry_info.error is failure
    success_info: SuccessInfo = on_success.call_args.args[0]
    assert success_info.attempt == 2
    assert success_info.total_time >= 0
    on_failure.assert_not_called()


def test_retry_executor_on_failure_callback(always_failing_work: FlakyWork) -> None:
    on_failure = Mock()
    executor, _ = create_executor(
        max_attempts=2, callback_config=CallbackConfig(on_failure=on_failure)
    )

    with pytest.raises(ValueError) as exc_info:
        executor.execute(always_failing_work)

    failure_info: FailureInfo = on_failure.call_args.args[0]
    assert failure_info.attempt == 2
    assert failure_info.error is exc_info.value
    assert failure_info.exhausted


def test_retry_executor_on_failure_callback_non_retryable() -> None:
    on_failure = Mock()
    executor, _ = create_executor(
        max_attempts=4,
        callback_config=CallbackConfig(on_failure=on_failure),
        non_retryable=[KeyError],
    )

    with pytest.raises(KeyError):
        executor.execute(FlakyWork(failures=[KeyError("k")]))

    failure_info: FailureInfo = on_failure.call_args.args[0]
    assert failure_info.attempt == 1
    assert not failure_info.exhausted


def test_retry_executor_logs_retries(
    caplog: pytest.LogCaptureFixture, always_failing_work: FlakyWork
) -> None:
    executor, _ = create_executor(max_attempts=3)

    with caplog.at_level(logging.WARNING, logger="aretry"), pytest.raises(ValueError):
        executor.execute(always_failing_work)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert warnings[0].getMessage().startswith("Attempt 1/3 failed with ValueError")
    assert warnings[1].attempt == 2
    assert warnings[1].wait_time == 1.0
