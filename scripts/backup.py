"""Backup segments.

Note: copies every known segment of the configured backend into a timestamped
directory under ``backups/``. The copy can be opened with STORAGE_BACKEND=file.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from attendance_ledger.container import make_segment_provider
from attendance_ledger.core.constants import KNOWN_SEGMENTS
from attendance_ledger.database.segment import FileSegmentProvider, copy_segments


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    source = make_segment_provider(
        backend=settings.STORAGE_BACKEND,
        data_dir=getattr(settings, "DATA_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / f"segments_{ts}"
    target = FileSegmentProvider(out_dir)

    copied = copy_segments(source, target, KNOWN_SEGMENTS)
    print(f"OK: Backup created: {out_dir} (segments={copied})")


if __name__ == "__main__":
    main()
