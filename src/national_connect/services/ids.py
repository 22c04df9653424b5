"""Id generation shared by every collection."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class IdGenerator(Protocol):
    """Source of opaque, never reused identifiers."""

    def next_id(self) -> str:
        """Return a fresh identifier."""


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class MonotonicIdGenerator(IdGenerator):
    """Millisecond timestamp ids that never repeat within a process.

    When two ids are requested within the same millisecond, or the clock
    steps backwards, the previous value is bumped by one instead.
    """

    clock: Callable[[], int] = _now_millis
    _last: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def next_id(self) -> str:
        """Return the next strictly increasing id."""
        with self._lock:
            candidate = self.clock()
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)
