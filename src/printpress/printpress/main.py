from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, apply_seed_sql, ensure_company_info, list_tables
from .database.connection import db_config_from_settings

from .container import Container, build_container
from .common.http import register_error_handlers
from .attendance.controller import register as register_attendance
from .company.controller import register as register_company
from .dashboard.controller import register as register_dashboard
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .finance.controller import register as register_finance
from .payroll.controller import register as register_payroll
from .storage.controller import register as register_data
from .tasks.controller import register as register_tasks
from .worklogs.controller import register as register_worklogs

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parents[3]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower()
        db_config = getattr(settings, "DB_CONFIG", None)
        logger.info("settings=%s backend=%s", settings_module, backend)

        if backend == "mysql":
            logger.info("db=%s", db_config_from_settings(db_config).label)
            if getattr(settings, "AUTO_INIT_DB", False):
                apply_schema(db_config, schema_path=_ROOT / "database" / "schema.sql")
                ensure_company_info(db_config)
                logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
            if getattr(settings, "AUTO_SEED_DB", False):
                apply_seed_sql(db_config, seed_path=_ROOT / "database" / "seed.sql")
                logger.info("demo seed ready")

        container = build_container(
            backend=backend,
            db_config=db_config,
            local_data_path=getattr(settings, "LOCAL_DATA_PATH", None),
            advance_cutoff=getattr(settings, "PAYROLL_ADVANCE_CUTOFF", "componentwise"),
        )

    app.extensions["printpress"] = container

    register_error_handlers(app)
    register_employees(app, container)
    register_departments(app, container)
    register_tasks(app, container)
    register_worklogs(app, container)
    register_attendance(app, container)
    register_finance(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)
    register_company(app, container)
    register_data(app, container)

    return app
