from __future__ import annotations

import logging

from ..common.clock import Clock, MonotonicClock
from ..common.validators import require_u64
from ..core.exceptions import NotFoundError
from .model import Attendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record and look up attendance events.

    ``employee_id`` is not checked against the employee store. Times come only
    from the clock, wrapped so a later record never carries an earlier time.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Clock | None = None):
        self._attendance = attendance
        self._clock = MonotonicClock(clock) if clock else MonotonicClock()

    def submit_attendance(self, employee_id: int) -> Attendance:
        employee_id = require_u64(employee_id, "employee_id")
        stamp = require_u64(self._clock(), "time")

        record = self._attendance.create(employee_id=employee_id, time=stamp)
        logger.info("attendance %s submitted for employee %s at %s", record.id, employee_id, stamp)
        return record

    def get_attendance(self, attendance_id: int) -> Attendance:
        attendance_id = require_u64(attendance_id, "id")
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError(f"Attendance with ID {attendance_id} not found")
        return record
