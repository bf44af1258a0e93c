"""Last-request-wins bookkeeping for recomputed per-user results.

Each refresh takes a ticket before it starts computing. When it finishes it
may only publish its result if no newer refresh has been started for the
same user since. A slow, stale computation therefore never replaces the
result of a fresher one.

State for a key lives only while refreshes for it are in flight; the last
one to finish forgets the key.
"""

import threading
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


class RefreshGuard(Generic[T]):
    def __init__(self):
        self._lock = threading.Lock()
        self._issued: dict[Hashable, int] = {}
        self._pending: dict[Hashable, int] = {}
        self._committed: dict[Hashable, tuple[int, T]] = {}

    def begin(self, key: Hashable) -> int:
        """Start a refresh for `key` and return its ticket."""
        with self._lock:
            ticket = self._issued.get(key, 0) + 1
            self._issued[key] = ticket
            self._pending[key] = self._pending.get(key, 0) + 1
            return ticket

    def commit(self, key: Hashable, ticket: int, value: T) -> bool:
        """Publish `value` if `ticket` is still the newest one for `key`."""
        with self._lock:
            if ticket != self._issued.get(key):
                return False
            self._committed[key] = (ticket, value)
            return True

    def finish(self, key: Hashable) -> None:
        """Mark one refresh for `key` as done."""
        with self._lock:
            self._finish(key)

    def _finish(self, key: Hashable) -> None:
        remaining = self._pending.get(key, 0) - 1
        if remaining > 0:
            self._pending[key] = remaining
            return
        self._pending.pop(key, None)
        self._issued.pop(key, None)
        self._committed.pop(key, None)

    def latest(self, key: Hashable) -> Optional[T]:
        with self._lock:
            entry = self._committed.get(key)
            return entry[1] if entry else None

    def tracked(self) -> int:
        """Number of keys with refreshes in flight."""
        with self._lock:
            return len(self._pending)

    def run(self, key: Hashable, compute: Callable[[], T]) -> T:
        """Compute and publish, returning whatever is current afterwards.

        If a newer refresh already published, its value is returned instead of
        the one just computed. If the newer refresh is still running, this
        call's value is returned but not published.
        """
        ticket = self.begin(key)
        try:
            value = compute()
        except Exception:
            self.finish(key)
            raise

        with self._lock:
            result = value
            if ticket == self._issued.get(key):
                self._committed[key] = (ticket, value)
            else:
                entry = self._committed.get(key)
                if entry is not None and entry[0] > ticket:
                    result = entry[1]
            self._finish(key)
        return result
