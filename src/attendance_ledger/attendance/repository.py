from __future__ import annotations

from typing import Optional, Protocol

from .model import Attendance


class AttendanceRepository(Protocol):
    """Repository interface for attendance events.

    Note (DIP): the service depends on this interface, not on a concrete store.
    """

    def get_by_id(self, attendance_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def create(self, *, employee_id: int, time: int) -> Attendance:
        """Store a new event under a freshly allocated id and return it."""
        raise NotImplementedError
