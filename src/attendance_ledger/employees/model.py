from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object; ``employee_id`` is chosen by the caller and is the
    storage key.
    """

    employee_id: int
    name: str
    role: str

    def with_details(self, *, name: str, role: str) -> "Employee":
        return replace(self, name=name, role=role)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            employee_id=int(data["employee_id"]),
            name=str(data["name"]),
            role=str(data["role"]),
        )
