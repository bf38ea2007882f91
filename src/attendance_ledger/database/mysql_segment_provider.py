from __future__ import annotations

import logging
import threading
from typing import Dict

import mysql.connector

from ..core.exceptions import SegmentUnavailableError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone
from .segment import check_handle

logger = logging.getLogger(__name__)


class MySQLSegment:
    """A segment stored as one row of ``memory_segments``."""

    def __init__(self, handle: int, conn_factory: DatabaseConnection):
        self.handle = handle
        self._conn_factory = conn_factory

    def read(self) -> bytes:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT data FROM memory_segments WHERE handle=%s", (self.handle,))
                r = fetchone(cur)
        except mysql.connector.Error as exc:
            raise SegmentUnavailableError(f"Cannot read segment {self.handle}: {exc}") from exc
        if not r:
            return b""
        return bytes(r["data"])

    def write(self, data: bytes) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO memory_segments(handle, data)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE data=VALUES(data)
                    """,
                    (self.handle, bytes(data)),
                )
        except mysql.connector.Error as exc:
            raise SegmentUnavailableError(f"Cannot write segment {self.handle}: {exc}") from exc
        logger.debug("segment %s: wrote %d bytes to mysql", self.handle, len(data))


class MySQLSegmentProvider:
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._segments: Dict[int, MySQLSegment] = {}
        self._lock = threading.Lock()

    def segment(self, handle: int) -> MySQLSegment:
        handle = check_handle(handle)
        with self._lock:
            seg = self._segments.get(handle)
            if seg is None:
                seg = MySQLSegment(handle, self._conn_factory)
                self._segments[handle] = seg
            return seg

    def list_handles(self) -> list[int]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT handle FROM memory_segments ORDER BY handle")
                rows = fetchall(cur)
        except mysql.connector.Error as exc:
            raise SegmentUnavailableError(f"Cannot list segments: {exc}") from exc
        return [int(r["handle"]) for r in rows]
