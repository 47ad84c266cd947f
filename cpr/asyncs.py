"""Futures for background requests, with optional cancellation, and a shared worker pool."""

from __future__ import annotations

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as _wait_futures
from enum import Enum, auto
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class CancellationResult(Enum):
    failure = auto()
    success = auto()
    invalid_operation = auto()


class AsyncWrapper(Generic[T]):
    """Wraps a future; a result may be taken once. Given an Event it is cancellable."""

    def __init__(self, future: Future, cancelled: threading.Event | None = None) -> None:
        self._future: Future | None = future
        self._cancelled = cancelled

    @property
    def cancellable(self) -> bool:
        return self._cancelled is not None

    def __del__(self) -> None:
        cancelled = getattr(self, "_cancelled", None)
        if cancelled is not None:
            cancelled.set()

    def is_cancelled(self) -> bool:
        return self._cancelled is not None and self._cancelled.is_set()

    def valid(self) -> bool:
        return not self.is_cancelled() and self._future is not None

    def get(self) -> T:
        """Wait for and return the result; the wrapper is invalid afterwards."""
        if self.is_cancelled():
            raise RuntimeError("Calling AsyncWrapper.get on a cancelled request!")
        if self._future is None:
            raise RuntimeError("Calling AsyncWrapper.get when the associated future instance is invalid!")
        future, self._future = self._future, None
        return future.result()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait up to ``timeout`` seconds (forever if None); True once the result is ready."""
        if self.is_cancelled():
            raise RuntimeError("Calling AsyncWrapper.wait when the associated future is cancelled!")
        if self._future is None:
            raise RuntimeError("Calling AsyncWrapper.wait when the associated future is invalid!")
        _wait_futures([self._future], timeout=timeout)
        return self._future.done()

    def cancel(self) -> CancellationResult:
        if self._cancelled is None or self._future is None or self._cancelled.is_set():
            return CancellationResult.invalid_operation
        self._cancelled.set()
        return CancellationResult.success


_DEFAULT_MIN_THREADS = os.cpu_count() or 1
_DEFAULT_MAX_THREADS = 2 * _DEFAULT_MIN_THREADS
_DEFAULT_MAX_IDLE_MS = 60_000

_pool_lock = threading.Lock()
_pool: ThreadPoolExecutor | None = None


def _create_pool(min_threads: int, max_threads: int, max_idle_ms: int) -> ThreadPoolExecutor:
    if min_threads < 0 or max_threads < 1 or min_threads > max_threads:
        raise ValueError(f"invalid thread counts: min={min_threads}, max={max_threads}")
    if max_idle_ms < 0:
        raise ValueError(f"invalid idle time: {max_idle_ms}")
    return ThreadPoolExecutor(max_workers=max_threads, thread_name_prefix="cpr")


def startup(
    min_threads: int = _DEFAULT_MIN_THREADS,
    max_threads: int = _DEFAULT_MAX_THREADS,
    max_idle_ms: int = _DEFAULT_MAX_IDLE_MS,
) -> None:
    """Start the shared pool; does nothing if it is already running."""
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = _create_pool(min_threads, max_threads, max_idle_ms)


def cleanup() -> None:
    """Finish queued work and shut the shared pool down."""
    global _pool
    with _pool_lock:
        pool, _pool = _pool, None
    if pool is not None:
        pool.shutdown(wait=True)


def submit(fn: Callable[..., T], *args: Any, **kwargs: Any) -> AsyncWrapper[T]:
    """Run ``fn`` on the shared pool, starting it if needed."""
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = _create_pool(_DEFAULT_MIN_THREADS, _DEFAULT_MAX_THREADS, _DEFAULT_MAX_IDLE_MS)
        future = _pool.submit(fn, *args, **kwargs)
    return AsyncWrapper(future)