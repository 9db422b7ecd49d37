"""Readers-writer lock guarding the per-address language cache.

The cache is read on every request and written only on a miss, so the lock
allows:
- Any number of concurrent readers (cache hits)
- One exclusive writer (storing a freshly computed entry)
- Writer preference, so a burst of hits cannot starve a pending insert
- Optional timeout for lock acquisition (raises TimeoutError)

Architecture:
    A single condition variable coordinates readers and writers. A reader
    waits while a writer is active or queued; a writer waits until no reader
    and no other writer holds the lock.

Limitations:
    The lock is not reentrant. A thread must release its read lock before
    asking for the write lock; the cache never nests acquisitions.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared with other readers
        >>> with lock.write():
        ...     pass  # exclusive
    """

    __slots__ = ("_active_readers", "_condition", "_waiting_writers", "_writer_active")

    def __init__(self) -> None:
        """Initialize readers-writer lock."""
        self._condition = threading.Condition(threading.Lock())
        self._active_readers: int = 0
        self._writer_active: bool = False
        self._waiting_writers: int = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Acquire the lock for shared access.

        Args:
            timeout: Maximum seconds to wait. None (default) waits
                indefinitely; 0.0 is a non-blocking attempt.

        Raises:
            TimeoutError: If the lock cannot be acquired within timeout
            ValueError: If timeout is negative
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Acquire the lock for exclusive access.

        Args:
            timeout: Maximum seconds to wait. None (default) waits
                indefinitely; 0.0 is a non-blocking attempt.

        Raises:
            TimeoutError: If the lock cannot be acquired within timeout
            ValueError: If timeout is negative
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    @staticmethod
    def _deadline(timeout: float | None) -> float | None:
        if timeout is None:
            return None
        if timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)
        return time.monotonic() + timeout

    def _wait(self, deadline: float | None, what: str) -> None:
        """Wait on the condition once; caller holds the condition lock."""
        if deadline is None:
            self._condition.wait()
            return
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            msg = f"Timed out waiting for {what} lock"
            raise TimeoutError(msg)
        self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        with self._condition:
            while self._writer_active or self._waiting_writers > 0:
                self._wait(deadline, "read")
            self._active_readers += 1

    def _release_read(self) -> None:
        with self._condition:
            if self._active_readers == 0:
                msg = "Read lock released more times than acquired"
                raise RuntimeError(msg)
            self._active_readers -= 1
            if self._active_readers == 0:
                self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._writer_active:
                    self._wait(deadline, "write")
                self._writer_active = True
            finally:
                # Readers blocked on writer preference must re-check, also
                # when this writer gave up with TimeoutError.
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if not self._writer_active:
                msg = "Write lock released while not held"
                raise RuntimeError(msg)
            self._writer_active = False
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of read locks currently held (point-in-time snapshot)."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """True if a thread currently holds the write lock."""
        with self._condition:
            return self._writer_active

    @property
    def writers_waiting(self) -> int:
        """Number of threads blocked waiting for the write lock."""
        with self._condition:
            return self._waiting_writers
