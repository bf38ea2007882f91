from __future__ import annotations

import threading
import time
from typing import Callable

Clock = Callable[[], int]


def now_ns() -> int:
    """Current wall-clock time in nanoseconds since the Unix epoch.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return time.time_ns()


class MonotonicClock:
    """Wall-clock source that never goes backwards.

    If the system clock steps back, the last value handed out is repeated until
    real time catches up.
    """

    def __init__(self, source: Clock = now_ns):
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self._last = max(self._last, int(self._source()))
            return self._last
