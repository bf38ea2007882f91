from __future__ import annotations

import mysql.connector
import pytest

from attendance_ledger.core.constants import EMPLOYEE_SEGMENT
from attendance_ledger.core.exceptions import SegmentUnavailableError
from attendance_ledger.database.mysql_segment_provider import MySQLSegmentProvider
from attendance_ledger.employees.model import Employee
from attendance_ledger.storage.codec import JsonRecordCodec
from attendance_ledger.storage.keys import CallerKeys
from attendance_ledger.storage.record_store import RecordStore


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self._rows: list[dict] = []

    def execute(self, sql, params=()):
        if self._conn.fail_execute:
            raise mysql.connector.Error(msg="lost connection")
        sql = " ".join(sql.split())
        table = self._conn.table
        if sql.startswith("SELECT data FROM memory_segments"):
            handle = params[0]
            self._rows = [{"data": bytearray(table[handle])}] if handle in table else []
        elif sql.startswith("INSERT INTO memory_segments"):
            handle, data = params
            self._conn.pending[handle] = data
        elif sql.startswith("SELECT handle FROM memory_segments"):
            self._rows = [{"handle": h} for h in sorted(table)]
        else:
            raise AssertionError(f"unexpected SQL: {sql}")

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, factory):
        self._factory = factory
        self.table = factory.table
        self.pending: dict[int, bytes] = {}
        self.fail_execute = factory.fail_execute

    def cursor(self, dictionary=False):
        assert dictionary
        return FakeCursor(self)

    def commit(self):
        self.table.update(self.pending)
        self.pending.clear()
        self._factory.commits += 1

    def rollback(self):
        self.pending.clear()
        self._factory.rollbacks += 1

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.table: dict[int, bytes] = {}
        self.commits = 0
        self.rollbacks = 0
        self.fail_execute = False
        self.fail_connect = False

    def connect(self):
        if self.fail_connect:
            raise mysql.connector.Error(msg="server gone")
        return FakeConnection(self)


def test_unwritten_segment_reads_empty():
    provider = MySQLSegmentProvider(FakeConnFactory())

    assert provider.segment(5).read() == b""


def test_write_is_upserted_and_committed():
    factory = FakeConnFactory()
    provider = MySQLSegmentProvider(factory)

    provider.segment(5).write(b"one")
    provider.segment(5).write(b"two")

    assert provider.segment(5).read() == b"two"
    assert factory.table == {5: b"two"}
    assert factory.commits >= 2


def test_list_handles_is_sorted():
    factory = FakeConnFactory()
    provider = MySQLSegmentProvider(factory)
    provider.segment(6).write(b"b")
    provider.segment(0).write(b"a")

    assert provider.list_handles() == [0, 6]


def test_failed_statement_rolls_back_and_raises():
    factory = FakeConnFactory()
    provider = MySQLSegmentProvider(factory)
    provider.segment(5).write(b"kept")

    factory.fail_execute = True
    with pytest.raises(SegmentUnavailableError):
        provider.segment(5).write(b"lost")

    factory.fail_execute = False
    assert factory.rollbacks == 1
    assert provider.segment(5).read() == b"kept"


def test_unreachable_server_raises_segment_unavailable():
    factory = FakeConnFactory()
    factory.fail_connect = True
    provider = MySQLSegmentProvider(factory)

    with pytest.raises(SegmentUnavailableError):
        provider.segment(5).read()


def test_record_store_over_mysql_segments_survives_reload():
    factory = FakeConnFactory()

    def store():
        return RecordStore(
            MySQLSegmentProvider(factory).segment(EMPLOYEE_SEGMENT),
            JsonRecordCodec(Employee.to_dict, Employee.from_dict),
            CallerKeys(),
            name="employee",
        )

    store().put(1, Employee(employee_id=1, name="Bob", role="Clerk"))

    assert store().get(1) == Employee(employee_id=1, name="Bob", role="Clerk")
