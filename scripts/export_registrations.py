"""Write all registrations to an .xlsx file.

Usage: python scripts/export_registrations.py [output-path]
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

from event_checkin.config import get_settings_module
from event_checkin.container import build_container
from event_checkin.export.service import build_registrations_workbook


def main(argv: list[str]) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        storage_backend=settings.STORAGE_BACKEND,
        database_url=settings.DATABASE_URL,
        data_file=settings.DATA_FILE,
    )

    if len(argv) > 1:
        out_file = Path(argv[1])
    else:
        out_dir = Path(__file__).resolve().parents[1] / "exports"
        out_dir.mkdir(parents=True, exist_ok=True)
        out_file = out_dir / f"attendance_{datetime.now():%Y%m%d_%H%M%S}.xlsx"

    try:
        rows = container.registration_service.list()
        out_file.write_bytes(build_registrations_workbook(rows))
    finally:
        container.close()
    print(f"OK: exported {len(rows)} registrations -> {out_file}")


if __name__ == "__main__":
    main(sys.argv)
