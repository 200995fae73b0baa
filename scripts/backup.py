"""Write the full-database JSON backup for the configured store.

Usage: python scripts/backup.py [output_dir]
"""

from __future__ import annotations

import importlib
import sys
from datetime import date
from pathlib import Path

from church_roster.config import get_settings_module
from church_roster.container import build_container
from church_roster.serialization.filenames import database_json_name


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    out_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / database_json_name(date.today())

    out_file.write_text(container.backup_service.export_database(), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
