from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one attendance event.

    ``time`` is the server time at submission, in nanoseconds since the Unix epoch.
    """

    id: int
    employee_id: int
    time: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Attendance":
        return cls(
            id=int(data["id"]),
            employee_id=int(data["employee_id"]),
            time=int(data["time"]),
        )
