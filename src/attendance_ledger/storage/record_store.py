"""Durable sorted key -> record mapping kept in a single segment.

Segment layout (big-endian)::

    b"RST1" | count: u32 | count x (key: u64 | length: u16 | payload)

Entries are written in ascending key order, so the stored bytes can be walked in
key order without rebuilding anything. Every ``put`` rewrites the whole segment
through ``Segment.write``, which is atomic; a record is therefore either fully
present or absent.
"""
from __future__ import annotations

import bisect
import logging
import struct
import threading
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from ..common.validators import require_u64
from ..core.exceptions import CorruptSegmentError
from ..database.segment import Segment
from .codec import JsonRecordCodec
from .keys import KeyPolicy

logger = logging.getLogger(__name__)

E = TypeVar("E")

_MAGIC = b"RST1"
_HEADER = struct.Struct(">4sI")
_ENTRY = struct.Struct(">QH")


class RecordStore(Generic[E]):
    def __init__(self, segment: Segment, codec: JsonRecordCodec[E], key_policy: KeyPolicy, *, name: str):
        if codec.max_size > 0xFFFF:
            raise ValueError("Record size bound must fit in the u16 length field")
        self._segment = segment
        self._codec = codec
        self._key_policy = key_policy
        self.name = name
        self._lock = threading.RLock()
        self._entries: Dict[int, bytes] = self._load(segment.read())
        self._keys: List[int] = sorted(self._entries)
        logger.debug("%s store loaded %d records from segment %s", name, len(self._keys), segment.handle)

    def _load(self, raw: bytes) -> Dict[int, bytes]:
        if not raw:
            return {}
        if len(raw) < _HEADER.size:
            raise CorruptSegmentError(f"{self.name} segment is truncated")
        magic, count = _HEADER.unpack_from(raw, 0)
        if magic != _MAGIC:
            raise CorruptSegmentError(f"{self.name} segment has bad header {magic!r}")

        entries: Dict[int, bytes] = {}
        offset = _HEADER.size
        previous = -1
        for _ in range(count):
            if offset + _ENTRY.size > len(raw):
                raise CorruptSegmentError(f"{self.name} segment is truncated")
            key, length = _ENTRY.unpack_from(raw, offset)
            offset += _ENTRY.size
            payload = raw[offset:offset + length]
            if len(payload) != length:
                raise CorruptSegmentError(f"{self.name} segment is truncated")
            if key <= previous:
                raise CorruptSegmentError(f"{self.name} segment keys out of order at {key}")
            offset += length
            entries[key] = payload
            previous = key
        if offset != len(raw):
            raise CorruptSegmentError(f"{self.name} segment has trailing bytes")
        return entries

    def _dump(self, entries: Dict[int, bytes], keys: List[int]) -> bytes:
        parts = [_HEADER.pack(_MAGIC, len(keys))]
        for key in keys:
            payload = entries[key]
            parts.append(_ENTRY.pack(key, len(payload)))
            parts.append(payload)
        return b"".join(parts)

    @property
    def key_policy(self) -> KeyPolicy:
        return self._key_policy

    def get(self, key: int) -> Optional[E]:
        with self._lock:
            payload = self._entries.get(key)
        if payload is None:
            return None
        return self._codec.decode(payload)

    def put(self, key: int, record: E) -> None:
        key = require_u64(key, "key")
        payload = self._codec.encode(record)
        with self._lock:
            entries = dict(self._entries)
            entries[key] = payload
            keys = self._keys
            if key not in self._entries:
                keys = list(keys)
                bisect.insort(keys, key)
            self._segment.write(self._dump(entries, keys))
            self._entries = entries
            self._keys = keys

    def create(self, build: Callable[[int], E], *, key: Optional[int] = None) -> E:
        """Assign a key through the store's key policy, build the record and store it."""
        with self._lock:
            assigned = self._key_policy.assign(key)
            record = build(assigned)
            self.put(assigned, record)
            return record

    def insert_new(self, key: int, record: E) -> bool:
        """Store ``record`` only if ``key`` is unused; returns False if it is taken.

        The check and the write happen under the store lock.
        """
        with self._lock:
            key = self._key_policy.assign(key)
            if key in self._entries:
                return False
            self.put(key, record)
            return True

    def contains(self, key: int) -> bool:
        with self._lock:
            return key in self._entries

    def keys(self) -> List[int]:
        with self._lock:
            return list(self._keys)

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
