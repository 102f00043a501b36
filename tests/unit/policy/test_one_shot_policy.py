r"""Unit tests for the one-shot retry policy."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry import OneShotRetryPolicy, get_suppressed
from tests.helpers import FlakyWork


def test_one_shot_policy_defaults() -> None:
    policy = OneShotRetryPolicy()
    assert policy.duration == 0.0
    assert policy.max_attempts == 2


def test_one_shot_policy_two_invocations(always_failing_work: FlakyWork) -> None:
    """Test that a failing work is invoked exactly twice."""
    sleep = Mock()
    policy = OneShotRetryPolicy(duration=0.3, sleep=sleep)

    with pytest.raises(ValueError, match=r"^failure 0$") as exc_info:
        policy.perform(always_failing_work)

    assert always_failing_work.calls == 2
    sleep.assert_called_once_with(0.3)
    assert [str(e) for e in get_suppressed(exc_info.value)] == ["failure 1"]


def test_one_shot_policy_second_attempt_succeeds() -> None:
    work = FlakyWork(failures=[TimeoutError()], result="value")
    assert OneShotRetryPolicy().perform_and_get(work) == "value"
    assert work.calls == 2


def test_one_shot_policy_failure_on_retry_is_propagated() -> None:
    """Test that the failure of the retry is raised, not swallowed."""
    failures = [TimeoutError("first"), RuntimeError("second")]
    with pytest.raises(TimeoutError, match=r"^first$") as exc_info:
        OneShotRetryPolicy().perform_and_get(FlakyWork(failures=failures, result="value"))
    assert exc_info.value is failures[0]
    assert get_suppressed(exc_info.value) == (failures[1],)


def test_one_shot_policy_non_retryable() -> None:
    sleep = Mock()
    work = FlakyWork(failures=[PermissionError()], result="value")
    policy = OneShotRetryPolicy(duration=1.0, sleep=sleep, non_retryable=[PermissionError])

    with pytest.raises(PermissionError):
        policy.perform(work)

    assert work.calls == 1
    sleep.assert_not_called()


def test_one_shot_policy_none_duration() -> None:
    with pytest.raises(ValueError, match=r"duration must not be None"):
        OneShotRetryPolicy(duration=None)  # type: ignore[arg-type]


def test_one_shot_policy_repr() -> None:
    assert repr(OneShotRetryPolicy(duration=0.5)) == "OneShotRetryPolicy(duration=0.5)"
