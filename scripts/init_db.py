"""Create the database (if needed), apply schema.sql and the default company row."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.printpress.printpress.database.bootstrap import apply_schema, ensure_company_info, list_tables
from src.printpress.printpress.database.connection import db_config_from_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    ensure_company_info(db_config)

    tables = list_tables(db_config)
    print(f"OK: schema applied -> {db_config_from_settings(db_config).label} (tables={len(tables)})")


if __name__ == "__main__":
    main()
