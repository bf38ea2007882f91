from __future__ import annotations

from typing import Optional

from ..storage.record_store import RecordStore
from .model import Employee
from .repository import EmployeeRepository


class SegmentEmployeeRepository(EmployeeRepository):
    def __init__(self, store: RecordStore[Employee]):
        self._store = store

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._store.get(employee_id)

    def add(self, employee: Employee) -> bool:
        return self._store.insert_new(employee.employee_id, employee)

    def save(self, employee: Employee) -> Employee:
        return self._store.create(lambda _key: employee, key=employee.employee_id)
