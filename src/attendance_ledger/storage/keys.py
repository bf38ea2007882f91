from __future__ import annotations

from typing import Optional, Protocol

from ..common.validators import require_u64
from .allocator import IdAllocator


class KeyPolicy(Protocol):
    """Decides which key a newly created record is stored under."""

    def assign(self, requested: Optional[int]) -> int:
        raise NotImplementedError


class AllocatedKeys:
    """Keys are issued by the allocator; callers may not choose them."""

    def __init__(self, allocator: IdAllocator):
        self._allocator = allocator

    def assign(self, requested: Optional[int]) -> int:
        if requested is not None:
            raise ValueError("Keys of this store are allocator-issued")
        return self._allocator.next()


class CallerKeys:
    """Keys are supplied by the caller and used as-is."""

    def assign(self, requested: Optional[int]) -> int:
        if requested is None:
            raise ValueError("Keys of this store must be supplied by the caller")
        return require_u64(requested, "key")
