"""Seed demo employees through the service layer."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from attendance_ledger.container import build_container, make_segment_provider

DEMO_EMPLOYEES = [
    (1, "Bob", "Clerk"),
    (2, "Alice", "Manager"),
    (3, "Nguyễn Văn A", "Engineer"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    provider = make_segment_provider(
        backend=settings.STORAGE_BACKEND,
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    container = build_container(provider)

    for employee_id, name, role in DEMO_EMPLOYEES:
        container.employee_service.add_employee(employee_id, name, role)

    print(f"OK: Seeded {len(DEMO_EMPLOYEES)} employees ({settings.STORAGE_BACKEND} backend)")


if __name__ == "__main__":
    main()
