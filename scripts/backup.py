"""Back up the data set.

MySQL backend: runs `mysqldump` (needs the MySQL client tools on PATH).
Local backend: copies the JSON export next to the other backups.
"""

from __future__ import annotations

import importlib
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.printpress.printpress.storage.local_state import LocalStateStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    if str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower() == "local":
        store = LocalStateStore.open(settings.LOCAL_DATA_PATH or None)
        out_file = out_dir / f"printpress_{ts}.json"
        out_file.write_text(store.export_json(), encoding="utf-8")
        print(f"OK: Backup created: {out_file}")
        return

    db = settings.DB_CONFIG
    out_file = out_dir / f"printpress_db_{ts}.sql"
    cmd = [
        "mysqldump",
        f"-h{db['host']}",
        f"-P{db.get('port', 3306)}",
        f"-u{db['user']}",
        f"-p{db['password']}",
        db["database"],
    ]

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
        print(f"OK: Backup created: {out_file}")
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools or back up with Workbench.")


if __name__ == "__main__":
    main()
