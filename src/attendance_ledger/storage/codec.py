from __future__ import annotations

import json
from typing import Any, Callable, Generic, Mapping, TypeVar

from ..core.constants import DEFAULT_MAX_RECORD_SIZE
from ..core.exceptions import CorruptSegmentError, RecordTooLargeError

E = TypeVar("E")


class JsonRecordCodec(Generic[E]):
    """Encodes records as compact UTF-8 JSON, bounded to ``max_size`` bytes.

    ``to_dict``/``from_dict`` translate between the record type and plain JSON
    values; ints and strings pass through without loss.
    """

    def __init__(
        self,
        to_dict: Callable[[E], Mapping[str, Any]],
        from_dict: Callable[[Mapping[str, Any]], E],
        *,
        max_size: int = DEFAULT_MAX_RECORD_SIZE,
    ):
        self._to_dict = to_dict
        self._from_dict = from_dict
        self.max_size = int(max_size)

    def encode(self, record: E) -> bytes:
        data = json.dumps(
            self._to_dict(record),
            ensure_ascii=False,
            separators=(",", ":"),
            sort_keys=True,
        ).encode("utf-8")
        if len(data) > self.max_size:
            raise RecordTooLargeError(
                f"Encoded record is {len(data)} bytes, limit is {self.max_size}"
            )
        return data

    def decode(self, data: bytes) -> E:
        try:
            return self._from_dict(json.loads(data.decode("utf-8")))
        except (UnicodeDecodeError, ValueError, KeyError, TypeError) as exc:
            raise CorruptSegmentError(f"Stored record does not decode: {exc}") from exc
