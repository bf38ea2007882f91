"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the behaviour lives in the services.
"""

import tempfile

from attendance_ledger.container import build_container
from attendance_ledger.database.segment import FileSegmentProvider


def main():
    with tempfile.TemporaryDirectory() as data_dir:
        container = build_container(FileSegmentProvider(data_dir))
        print(container.employee_service.add_employee(1, "Bob", "Clerk"))
        print(container.attendance_service.submit_attendance(1))
        print(container.attendance_service.submit_attendance(1))

        # a second container over the same directory sees the same state
        restarted = build_container(FileSegmentProvider(data_dir))
        print(restarted.employee_service.get_employee(1))
        print(restarted.attendance_service.submit_attendance(1))


if __name__ == "__main__":
    main()
