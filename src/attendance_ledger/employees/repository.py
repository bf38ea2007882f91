from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> bool:
        """Insert only if ``employee.employee_id`` is unused; False if it is taken."""
        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        """Insert or overwrite the record keyed by ``employee.employee_id``."""
        raise NotImplementedError
