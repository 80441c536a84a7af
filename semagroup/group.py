"""A counting semaphore that also works as a wait group."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Protocol

_MAX_SIZE = 2**32 - 1
_POLL_INTERVAL = 0.005


class GroupError(RuntimeError):
    """Raised when a Group is used in a way that breaks its accounting."""


class _Done(Protocol):
    def is_set(self) -> bool: ...

    def wait(self, timeout: Optional[float] = None) -> bool: ...


@dataclass(eq=False)
class _Waiter:
    n: int
    done: Optional[_Done]
    granted: bool = False
    aborted: bool = False


def _check_n(n: int, operation: str) -> None:
    if n <= 0:
        raise ValueError(f"invalid group {operation} N value: {n}")


class Group:
    """Guards concurrent access to a resource.

    A group of size 0 has no concurrency limit and behaves like a wait group:
    reservations never block, and ``wait`` blocks until every reservation has
    been freed. A positive size caps the number of units active at once;
    blocked reservations are granted in arrival order.
    """

    def __init__(self, size: int = 0) -> None:
        self._cond = threading.Condition()
        self._size = 0
        self._active = 0
        self._pending = 0
        self._queue: Deque[_Waiter] = deque()
        self._zero_event: Optional[threading.Event] = None
        self._apply_size(size)

    def _apply_size(self, size: int) -> None:
        size = max(size, 0)
        if size > _MAX_SIZE:
            raise ValueError(f"incorrect group size: {size}")
        self._size = size

    def set_size(self, size: int) -> None:
        """Set the limit once, before the group is used.

        A size of 0 or less means no limit and may be set repeatedly.
        """
        with self._cond:
            if self._active != 0 or self._pending != 0:
                raise GroupError("group is already in use")
            if self._size > 0:
                raise GroupError("group already initialized")
            self._apply_size(size)

    def size(self) -> int:
        """The maximum number of units that may be active at once (0: no limit)."""
        with self._cond:
            return self._size

    def active_count(self) -> int:
        """Units currently reserved."""
        with self._cond:
            return self._active

    def pending_count(self) -> int:
        """Units requested by reservations that are currently blocked."""
        with self._cond:
            return self._pending

    def reserve(self) -> None:
        """Reserve one unit, blocking until there is room."""
        self.reserve_n(None, 1)

    def reserve_n(self, done: Optional[_Done] = None, n: int = 1) -> bool:
        """Reserve ``n`` units, blocking until there is room.

        ``done`` is an optional event-like object; once it is set the call
        gives up and returns False, leaving the counters untouched.
        A request larger than the size can never succeed: it waits for
        ``done`` (if given) and returns False.
        """
        _check_n(n, "reserve")
        if done is not None and done.is_set():
            return False

        with self._cond:
            size = self._size
            if size == 0:
                self._active += n
                return True
            if n <= size:
                if self._pending == 0 and self._active + n <= size:
                    self._active += n
                    return True
                return self._block(_Waiter(n, done))

        if done is not None:
            done.wait()
        return False

    def _block(self, waiter: _Waiter) -> bool:
        self._queue.append(waiter)
        self._pending += waiter.n
        timeout = None if waiter.done is None else _POLL_INTERVAL
        while True:
            if waiter.granted:
                return True
            if waiter.aborted:
                return False
            if waiter.done is not None and waiter.done.is_set():
                self._queue.remove(waiter)
                self._pending -= waiter.n
                self._settle()
                return False
            self._cond.wait(timeout)

    def _settle(self) -> None:
        changed = False
        while self._queue:
            head = self._queue[0]
            if head.done is not None and head.done.is_set():
                self._queue.popleft()
                self._pending -= head.n
                head.aborted = True
                changed = True
                continue
            if self._active + head.n > self._size:
                break
            self._queue.popleft()
            self._pending -= head.n
            self._active += head.n
            head.granted = True
            changed = True
        if changed:
            self._cond.notify_all()
        if self._pending <= 0 and self._active <= 0 and self._zero_event is not None:
            self._zero_event.set()
            self._zero_event = None

    def try_reserve_n(self, n: int) -> bool:
        """Reserve ``n`` units only if that is possible without blocking."""
        _check_n(n, "reserve")
        with self._cond:
            if self._size == 0:
                self._active += n
                return True
            if n > self._size:
                return False
            if self._pending == 0 and self._active + n <= self._size:
                self._active += n
                return True
            return False

    def free(self) -> None:
        """Free one unit."""
        self.free_n(1)

    def free_n(self, n: int) -> None:
        """Free ``n`` units, waking blocked reservations and waiters as possible."""
        _check_n(n, "free")
        with self._cond:
            self._active -= n
            self._settle()
            if self._active < 0:
                raise GroupError("negative group counter")

    def wait_event(self) -> threading.Event:
        """An event that is set once the group has no active or pending units."""
        with self._cond:
            if self._pending <= 0 and self._active <= 0:
                event = threading.Event()
                event.set()
                return event
            if self._zero_event is None:
                self._zero_event = threading.Event()
            return self._zero_event

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the group reaches zero; False if ``timeout`` ran out first."""
        return self.wait_event().wait(timeout)

    def __enter__(self) -> "Group":
        self.reserve()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.free()