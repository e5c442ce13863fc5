"""Backup salary entries.

Note: Writes the raw mapping (employee id -> entries) as a JSON snapshot,
the same shape that is kept under the storage key.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.salary_sheet.salary_sheet.main import create_container


def main() -> None:
    container = create_container()
    snapshot = container.entry_store.get_all()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"salary_sheet_{ts}.json"
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} (employees={len(snapshot)})")


if __name__ == "__main__":
    main()
