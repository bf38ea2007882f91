from __future__ import annotations

import logging

from ..common.validators import require_text, require_u64
from ..core.exceptions import AlreadyExistsError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records.

    By default ``add_employee`` overwrites an existing record with the same id.
    With ``strict_create=True`` it raises ``AlreadyExistsError`` instead.
    """

    def __init__(self, employees: EmployeeRepository, *, strict_create: bool = False):
        self._employees = employees
        self._strict_create = bool(strict_create)

    def add_employee(self, employee_id: int, name: str, role: str) -> Employee:
        employee = Employee(
            employee_id=require_u64(employee_id, "employee_id"),
            name=require_text(name, "name"),
            role=require_text(role, "role"),
        )

        if not self._strict_create:
            saved = self._employees.save(employee)
        elif self._employees.add(employee):
            saved = employee
        else:
            raise AlreadyExistsError(f"Employee with ID {employee.employee_id} already exists")

        logger.info("employee %s saved", saved.employee_id)
        return saved

    def update_employee(self, employee_id: int, name: str, role: str) -> Employee:
        employee_id = require_u64(employee_id, "employee_id")
        name = require_text(name, "name")
        role = require_text(role, "role")

        current = self._employees.get_by_id(employee_id)
        if not current:
            raise NotFoundError(f"Employee with ID {employee_id} not found")

        updated = self._employees.save(current.with_details(name=name, role=role))
        logger.info("employee %s updated", employee_id)
        return updated

    def get_employee(self, employee_id: int) -> Employee:
        employee_id = require_u64(employee_id, "id")
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee with ID {employee_id} not found")
        return employee
