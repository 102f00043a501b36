r"""Unit tests for the retry decider."""

from __future__ import annotations

from enum import Enum

import pytest

from aretry.retry import RetryDecider


class ErrorKind(Enum):
    TRANSIENT = "transient"
    FATAL = "fatal"


class ServiceError(Exception):
    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def test_decider_retries_by_default() -> None:
    decider = RetryDecider()
    assert decider.should_retry(ValueError("boom")) == (True, "ValueError")


def test_decider_non_retryable_kind() -> None:
    decider = RetryDecider(non_retryable=[KeyError])
    assert decider.should_retry(KeyError("missing")) == (False, "KeyError is non-retryable")
    assert decider.should_retry(ValueError("boom")) == (True, "ValueError")


def test_decider_non_retryable_matches_subclasses() -> None:
    """Test that a subclass of a non-retryable kind is not retried."""
    decider = RetryDecider(non_retryable=[LookupError])
    should_retry, _ = decider.should_retry(KeyError("missing"))
    assert not should_retry


def test_decider_non_retryable_does_not_match_parent() -> None:
    decider = RetryDecider(non_retryable=[KeyError])
    should_retry, _ = decider.should_retry(LookupError("lookup"))
    assert should_retry


@pytest.mark.parametrize(
    ("kind", "expected"), [(ErrorKind.TRANSIENT, True), (ErrorKind.FATAL, False)]
)
def test_decider_retry_if_classifies_by_error_kind(kind: ErrorKind, expected: bool) -> None:
    """Test classification by an explicit error-kind field."""
    decider = RetryDecider(
        retry_if=lambda exc: getattr(exc, "kind", None) is not ErrorKind.FATAL,
    )
    should_retry, _ = decider.should_retry(ServiceError(kind))
    assert should_retry is expected


def test_decider_non_retryable_checked_before_retry_if() -> None:
    calls = []
    decider = RetryDecider(non_retryable=[KeyError], retry_if=lambda exc: calls.append(exc) or True)
    assert decider.should_retry(KeyError("missing"))[0] is False
    assert calls == []


def test_decider_retry_if_reason() -> None:
    decider = RetryDecider(retry_if=lambda exc: False)
    assert decider.should_retry(ValueError()) == (False, "retry_if returned False")
