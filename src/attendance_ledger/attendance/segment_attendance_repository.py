from __future__ import annotations

from typing import Optional

from ..storage.record_store import RecordStore
from .model import Attendance
from .repository import AttendanceRepository


class SegmentAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore[Attendance]):
        self._store = store

    def get_by_id(self, attendance_id: int) -> Optional[Attendance]:
        return self._store.get(attendance_id)

    def create(self, *, employee_id: int, time: int) -> Attendance:
        return self._store.create(
            lambda attendance_id: Attendance(id=attendance_id, employee_id=employee_id, time=time)
        )
