from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.model import Attendance
from .attendance.segment_attendance_repository import SegmentAttendanceRepository
from .attendance.service import AttendanceService
from .common.clock import Clock
from .core.constants import ATTENDANCE_SEGMENT, COUNTER_SEGMENT, DEFAULT_MAX_RECORD_SIZE, EMPLOYEE_SEGMENT
from .core.enums import StorageBackend
from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_segment_provider import MySQLSegmentProvider
from .database.segment import FileSegmentProvider, SegmentProvider
from .employees.model import Employee
from .employees.segment_employee_repository import SegmentEmployeeRepository
from .employees.service import EmployeeService
from .storage.allocator import IdAllocator
from .storage.cell import U64Cell
from .storage.codec import JsonRecordCodec
from .storage.keys import AllocatedKeys, CallerKeys
from .storage.record_store import RecordStore


@dataclass(frozen=True)
class Container:
    provider: SegmentProvider
    allocator: IdAllocator

    attendance_store: RecordStore[Attendance]
    employee_store: RecordStore[Employee]

    attendance_repo: SegmentAttendanceRepository
    employees_repo: SegmentEmployeeRepository

    attendance_service: AttendanceService
    employee_service: EmployeeService


def make_segment_provider(
    *,
    backend: str | StorageBackend,
    data_dir: str | Path | None = None,
    db_config: Optional[dict] = None,
) -> SegmentProvider:
    backend = StorageBackend(backend)
    if backend == StorageBackend.MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql backend")
        return MySQLSegmentProvider(DatabaseConnection(DBConfig.from_dict(db_config)))

    if not data_dir:
        raise ValueError("DATA_DIR is required for the file backend")
    return FileSegmentProvider(data_dir)


def build_container(
    provider: SegmentProvider,
    *,
    clock: Clock | None = None,
    max_record_size: int = DEFAULT_MAX_RECORD_SIZE,
    strict_employee_create: bool = False,
) -> Container:
    allocator = IdAllocator(U64Cell(provider.segment(COUNTER_SEGMENT)))

    attendance_store: RecordStore[Attendance] = RecordStore(
        provider.segment(ATTENDANCE_SEGMENT),
        JsonRecordCodec(Attendance.to_dict, Attendance.from_dict, max_size=max_record_size),
        AllocatedKeys(allocator),
        name="attendance",
    )
    employee_store: RecordStore[Employee] = RecordStore(
        provider.segment(EMPLOYEE_SEGMENT),
        JsonRecordCodec(Employee.to_dict, Employee.from_dict, max_size=max_record_size),
        CallerKeys(),
        name="employee",
    )

    attendance_repo = SegmentAttendanceRepository(attendance_store)
    employees_repo = SegmentEmployeeRepository(employee_store)

    attendance_service = AttendanceService(attendance_repo, clock=clock)
    employee_service = EmployeeService(employees_repo, strict_create=strict_employee_create)

    return Container(
        provider=provider,
        allocator=allocator,
        attendance_store=attendance_store,
        employee_store=employee_store,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        attendance_service=attendance_service,
        employee_service=employee_service,
    )
