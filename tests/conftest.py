from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.utils.worker import shutdown_default_executor
from tests.helpers import FlakyWork

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()


@pytest.fixture
def always_failing_work() -> FlakyWork:
    """Create a work that raises ValueError on every invocation."""
    return FlakyWork(failures=[ValueError(f"failure {i}") for i in range(100)])


@pytest.fixture(autouse=True)
def _shutdown_worker_pool() -> Generator[None, None, None]:
    """Release the shared worker pool after each test."""
    yield
    shutdown_default_executor(wait=True)
