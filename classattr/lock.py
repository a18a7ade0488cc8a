"""
Reader/writer locks guarding the attribute stores.

Each TypeNode and each OverrideLayer owns one lock: many readers may hold it
at once, a writer holds it alone. Writes are single map insertions, so no lock
is ever held across nodes.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class RWLock:
    """
    Shared-read/exclusive-write lock.

    Writers are preferred: once a writer is waiting, new readers block until it
    has finished, so a steady stream of getters cannot starve a setter.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class NullLock:
    """Lock with the RWLock interface that never blocks (thread_safe=False)."""

    @contextmanager
    def read(self) -> Iterator[None]:
        yield

    @contextmanager
    def write(self) -> Iterator[None]:
        yield


def make_lock(thread_safe: bool = True) -> RWLock | NullLock:
    """Return an RWLock, or a NullLock when locking is disabled."""
    return RWLock() if thread_safe else NullLock()
