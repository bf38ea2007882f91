from __future__ import annotations

import mysql.connector
import pytest

from attendance_ledger.attendance.model import Attendance
from attendance_ledger.container import build_container, make_segment_provider
from attendance_ledger.core.exceptions import NotFoundError, RecordTooLargeError, SegmentUnavailableError
from attendance_ledger.database.mysql_segment_provider import MySQLSegmentProvider
from attendance_ledger.database.segment import FileSegmentProvider
from attendance_ledger.employees.model import Employee


def test_end_to_end_scenario(container):
    container.employee_service.add_employee(1, "Bob", "Clerk")
    assert container.employee_service.get_employee(1) == Employee(employee_id=1, name="Bob", role="Clerk")

    first = container.attendance_service.submit_attendance(1)
    second = container.attendance_service.submit_attendance(1)

    assert (first.id, first.employee_id) == (1, 1)
    assert (second.id, second.employee_id) == (2, 1)
    assert second.time >= first.time

    with pytest.raises(NotFoundError):
        container.attendance_service.get_attendance(999)


def test_state_survives_restart(file_provider, ticking_clock):
    before = build_container(file_provider, clock=ticking_clock)
    before.employee_service.add_employee(1, "Bob", "Clerk")
    before.employee_service.update_employee(1, "Alice", "Manager")
    a1 = before.attendance_service.submit_attendance(1)
    a2 = before.attendance_service.submit_attendance(2)

    after = build_container(FileSegmentProvider(file_provider.root), clock=ticking_clock)

    assert after.employee_service.get_employee(1) == Employee(employee_id=1, name="Alice", role="Manager")
    assert after.attendance_service.get_attendance(a1.id) == a1
    assert after.attendance_service.get_attendance(a2.id) == a2
    assert after.attendance_service.submit_attendance(1).id == 3


def test_attendance_ids_are_independent_of_employee_ids(container):
    container.employee_service.add_employee(500, "Bob", "Clerk")

    assert container.attendance_service.submit_attendance(500).id == 1
    assert container.allocator.current == 1


def test_oversized_employee_is_not_stored(container):
    with pytest.raises(RecordTooLargeError):
        container.employee_service.add_employee(1, "x" * 1100, "Clerk")

    with pytest.raises(NotFoundError):
        container.employee_service.get_employee(1)


def test_custom_record_size_bound(file_provider):
    small = build_container(file_provider, max_record_size=48)

    with pytest.raises(RecordTooLargeError):
        small.employee_service.add_employee(1, "Bartholomew", "Senior Clerk")


def test_stores_use_their_own_segments(container):
    container.employee_service.add_employee(1, "Bob", "Clerk")
    container.attendance_service.submit_attendance(1)

    assert container.employee_store.keys() == [1]
    assert container.attendance_store.keys() == [1]
    assert isinstance(container.attendance_store.get(1), Attendance)
    assert sorted(p.name for p in container.provider.root.iterdir()) == [
        "segment-000.bin",
        "segment-005.bin",
        "segment-006.bin",
    ]


def test_make_segment_provider_selects_backend(tmp_path):
    assert isinstance(make_segment_provider(backend="file", data_dir=tmp_path), FileSegmentProvider)
    assert isinstance(
        make_segment_provider(backend="mysql", db_config={"host": "db", "user": "u", "password": "p", "database": "d"}),
        MySQLSegmentProvider,
    )


def test_make_segment_provider_requires_settings():
    with pytest.raises(ValueError):
        make_segment_provider(backend="file")
    with pytest.raises(ValueError):
        make_segment_provider(backend="mysql")
    with pytest.raises(ValueError):
        make_segment_provider(backend="sqlite", data_dir="x")


def test_mysql_providers_connect_to_their_own_database(monkeypatch):
    targets: list[str] = []

    def fake_connect(**kwargs):
        targets.append(kwargs["database"])
        raise mysql.connector.Error(msg="offline")

    monkeypatch.setattr(mysql.connector, "connect", fake_connect)
    first = make_segment_provider(backend="mysql", db_config={"host": "db", "database": "ledger_a"})
    second = make_segment_provider(backend="mysql", db_config={"host": "db", "database": "ledger_b"})

    for provider in (first, second):
        with pytest.raises(SegmentUnavailableError):
            provider.segment(5).read()

    assert targets == ["ledger_a", "ledger_b"]
