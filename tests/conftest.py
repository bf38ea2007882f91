from __future__ import annotations

import itertools
import time

import pytest

from attendance_ledger.container import build_container
from attendance_ledger.core.exceptions import SegmentUnavailableError
from attendance_ledger.database.segment import FileSegmentProvider, check_handle


class InMemorySegment:
    def __init__(self, handle: int):
        self.handle = handle
        self.data = b""
        self.writes = 0
        self.fail_writes = False
        self.write_delay = 0.0

    def read(self) -> bytes:
        return self.data

    def write(self, data: bytes) -> None:
        if self.write_delay:
            time.sleep(self.write_delay)
        if self.fail_writes:
            raise SegmentUnavailableError(f"segment {self.handle} is offline")
        self.data = bytes(data)
        self.writes += 1


class InMemorySegmentProvider:
    def __init__(self):
        self.segments: dict[int, InMemorySegment] = {}

    def segment(self, handle: int) -> InMemorySegment:
        handle = check_handle(handle)
        if handle not in self.segments:
            self.segments[handle] = InMemorySegment(handle)
        return self.segments[handle]


@pytest.fixture
def memory_provider():
    return InMemorySegmentProvider()


@pytest.fixture
def file_provider(tmp_path):
    return FileSegmentProvider(tmp_path / "segments")


@pytest.fixture
def ticking_clock():
    """Clock that advances one second (in ns) per call."""
    ticks = itertools.count(1_700_000_000_000_000_000, 1_000_000_000)
    return lambda: next(ticks)


@pytest.fixture
def container(file_provider, ticking_clock):
    return build_container(file_provider, clock=ticking_clock)
