"""Schema and seed helpers for the MySQL backend.

Used by ``create_app`` (AUTO_INIT_DB / AUTO_SEED_DB) and by ``scripts/``.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

import mysql.connector

from ..common.ids import new_id
from ..core.constants import DEFAULT_COMPANY_ADDRESS, DEFAULT_COMPANY_NAME
from .connection import DBConfig

logger = logging.getLogger(__name__)

_CREATE_DB_OR_USE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")


def _as_config(db_config: dict) -> DBConfig:
    return DBConfig(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "printpress_db")),
    )


@contextmanager
def _session(config: DBConfig, *, with_database: bool = True) -> Iterator:
    """Yield a plain cursor; commit when the block finishes cleanly."""

    kwargs = dict(host=config.host, port=config.port, user=config.user, password=config.password, use_pure=True)
    if with_database:
        kwargs["database"] = config.database
    conn = mysql.connector.connect(**kwargs)
    try:
        cur = conn.cursor()
        yield cur
        conn.commit()
    finally:
        conn.close()


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ``;`` outside quotes, dropping ``--`` comment lines."""

    lines = [line for line in sql.splitlines() if not line.lstrip().startswith("--")]
    text = "\n".join(lines)

    start = 0
    quote = None
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and quote:
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = text[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = text[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    config = _as_config(db_config)
    with _session(config, with_database=False) as cur:
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def _run_script(db_config: dict, path: str | Path) -> int:
    # The target database comes from settings, not from the script.
    sql = _CREATE_DB_OR_USE.sub("", Path(path).read_text(encoding="utf-8"))
    count = 0
    with _session(_as_config(db_config)) as cur:
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _run_script(db_config, schema_path)
    logger.info("Applied schema %s (%d statements)", schema_path, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _run_script(db_config, seed_path)
    logger.info("Applied seed %s (%d statements)", seed_path, count)


def ensure_company_info(db_config: dict) -> None:
    """Insert the default company row when the table is still empty."""

    with _session(_as_config(db_config)) as cur:
        cur.execute("SELECT COUNT(*) FROM company_info")
        (count,) = cur.fetchone()
        if not count:
            cur.execute(
                "INSERT INTO company_info (id, name, address, logo) VALUES (%s, %s, %s, NULL)",
                (new_id(), DEFAULT_COMPANY_NAME, DEFAULT_COMPANY_ADDRESS),
            )
            logger.info("Inserted default company info")


def list_tables(db_config: dict) -> list[str]:
    with _session(_as_config(db_config)) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
