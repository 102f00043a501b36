r"""Bounded worker pool running the retry loops of the async methods.

The ``*_async`` methods of the retry policies offload their whole
synchronous attempt loop, waits included, to a worker thread. By default
all of them share one lazily created ``ThreadPoolExecutor`` so the number
of threads stays bounded however many loops are outstanding.
"""

from __future__ import annotations

__all__ = ["get_default_executor", "shutdown_default_executor", "submit"]

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.config import DEFAULT_MAX_WORKERS

if TYPE_CHECKING:
    from collections.abc import Callable
    from concurrent.futures import Executor, Future

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default_executor: ThreadPoolExecutor | None = None


def get_default_executor() -> ThreadPoolExecutor:
    """Return the shared worker pool, creating it on first use.

    Returns:
        The shared ``ThreadPoolExecutor``.

    Example:
        ```pycon
        >>> from aretry.utils.worker import get_default_executor
        >>> get_default_executor() is get_default_executor()
        True

        ```
    """
    global _default_executor  # noqa: PLW0603
    with _lock:
        if _default_executor is None:
            logger.debug(f"Creating the shared worker pool ({DEFAULT_MAX_WORKERS} workers)")
            _default_executor = ThreadPoolExecutor(
                max_workers=DEFAULT_MAX_WORKERS, thread_name_prefix="aretry"
            )
        return _default_executor


def shutdown_default_executor(wait: bool = True) -> None:
    """Shut down the shared worker pool.

    A new pool is created the next time one is needed.

    Args:
        wait: If ``True``, block until the pending retry loops finish.
    """
    global _default_executor  # noqa: PLW0603
    with _lock:
        executor, _default_executor = _default_executor, None
    if executor is not None:
        executor.shutdown(wait=wait)


def submit(
    func: Callable[..., T], *args: Any, executor: Executor | None = None
) -> Future[T]:
    """Run ``func(*args)`` on a worker and return its future.

    Args:
        func: The function to run.
        *args: The positional arguments of ``func``.
        executor: The executor to use. Defaults to the shared worker pool.

    Returns:
        The future resolving to the result, or the exception, of ``func``.

    Example:
        ```pycon
        >>> from aretry.utils.worker import submit
        >>> submit(sum, [1, 2, 3]).result()
        6

        ```
    """
    if executor is None:
        executor = get_default_executor()
    return executor.submit(func, *args)
