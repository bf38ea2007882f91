"""Durable segments: independently persisted byte regions addressed by a small handle.

Every provider hands out one ``Segment`` object per handle. A segment is read and
written as a whole; ``write`` either replaces the previous contents completely or
leaves them untouched.
"""
from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Iterable, Protocol

from ..core.constants import MAX_SEGMENT_HANDLE
from ..core.exceptions import SegmentUnavailableError

logger = logging.getLogger(__name__)


class Segment(Protocol):
    handle: int

    def read(self) -> bytes:
        """Return the stored bytes, or ``b""`` if the segment was never written."""
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        raise NotImplementedError


class SegmentProvider(Protocol):
    def segment(self, handle: int) -> Segment:
        raise NotImplementedError


def check_handle(handle: int) -> int:
    if isinstance(handle, bool) or not isinstance(handle, int):
        raise TypeError(f"Segment handle must be an int, got {type(handle)!r}")
    if not 0 <= handle <= MAX_SEGMENT_HANDLE:
        raise ValueError(f"Segment handle {handle} outside 0..{MAX_SEGMENT_HANDLE}")
    return handle


class FileSegment:
    def __init__(self, handle: int, path: Path):
        self.handle = handle
        self._path = path

    def read(self) -> bytes:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return b""
        except OSError as exc:
            raise SegmentUnavailableError(f"Cannot read segment {self.handle}: {exc}") from exc

    def write(self, data: bytes) -> None:
        directory = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=directory)
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
            _fsync_dir(directory)
        except OSError as exc:
            raise SegmentUnavailableError(f"Cannot write segment {self.handle}: {exc}") from exc
        logger.debug("segment %s: wrote %d bytes to %s", self.handle, len(data), self._path)


def _fsync_dir(directory: Path) -> None:
    # Directory fsync makes the rename durable; not available on Windows.
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


class FileSegmentProvider:
    """One file per handle inside ``root``."""

    def __init__(self, root: str | Path):
        self._root = Path(root)
        self._segments: Dict[int, FileSegment] = {}
        self._lock = threading.Lock()
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SegmentUnavailableError(f"Cannot create data dir {self._root}: {exc}") from exc

    @property
    def root(self) -> Path:
        return self._root

    def segment(self, handle: int) -> FileSegment:
        handle = check_handle(handle)
        with self._lock:
            seg = self._segments.get(handle)
            if seg is None:
                seg = FileSegment(handle, self._root / f"segment-{handle:03d}.bin")
                self._segments[handle] = seg
            return seg


def copy_segments(source: SegmentProvider, target: SegmentProvider, handles: Iterable[int]) -> list[int]:
    """Copy the listed segments from one provider to another.

    Segments that were never written in ``source`` are skipped. Returns the handles
    that were copied.
    """
    copied: list[int] = []
    for handle in handles:
        data = source.segment(handle).read()
        if not data:
            continue
        target.segment(handle).write(data)
        copied.append(handle)
    return copied
