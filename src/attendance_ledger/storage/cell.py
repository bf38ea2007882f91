from __future__ import annotations

import struct

from ..core.constants import U64_MAX
from ..core.exceptions import CorruptSegmentError
from ..database.segment import Segment

_MAGIC = b"CEL1"
_LAYOUT = struct.Struct(">4sQ")


class U64Cell:
    """A single unsigned 64-bit value persisted in its own segment.

    An empty segment is initialised with ``default`` on construction. The cached
    value only changes after the segment write succeeded.
    """

    def __init__(self, segment: Segment, default: int = 0):
        self._segment = segment
        raw = segment.read()
        if raw:
            self._value = self._decode(raw)
        else:
            self._write(default)
            self._value = default

    def _decode(self, raw: bytes) -> int:
        if len(raw) != _LAYOUT.size:
            raise CorruptSegmentError(f"Counter segment {self._segment.handle} has {len(raw)} bytes")
        magic, value = _LAYOUT.unpack(raw)
        if magic != _MAGIC:
            raise CorruptSegmentError(f"Counter segment {self._segment.handle} has bad header {magic!r}")
        return value

    def _write(self, value: int) -> None:
        if not 0 <= value <= U64_MAX:
            raise ValueError(f"{value} does not fit in u64")
        self._segment.write(_LAYOUT.pack(_MAGIC, value))

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._write(value)
        self._value = value
