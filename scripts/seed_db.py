"""Load the demo departments, employees and tasks from seed.sql."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.printpress.printpress.database.bootstrap import apply_seed_sql, ensure_company_info
from src.printpress.printpress.database.connection import db_config_from_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_company_info(db_config)
    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    print(f"OK: demo data seeded -> {db_config_from_settings(db_config).label}")


if __name__ == "__main__":
    main()
