from __future__ import annotations

import logging
import threading

from ..core.constants import U64_MAX
from ..core.exceptions import AllocatorExhaustedError
from .cell import U64Cell

logger = logging.getLogger(__name__)


class IdAllocator:
    """Hands out unique, strictly increasing ids backed by a durable counter.

    ``next()`` returns the incremented counter value, so the first id is 1.
    The new value is persisted before it is returned; a failed write raises
    and the counter keeps its previous value.
    """

    def __init__(self, cell: U64Cell):
        self._cell = cell
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """Last id handed out (0 when nothing was allocated yet)."""
        with self._lock:
            return self._cell.get()

    def next(self) -> int:
        with self._lock:
            value = self._cell.get()
            if value >= U64_MAX:
                raise AllocatorExhaustedError("Identifier counter exhausted")
            self._cell.set(value + 1)
            logger.debug("allocated id %s", value + 1)
            return value + 1
