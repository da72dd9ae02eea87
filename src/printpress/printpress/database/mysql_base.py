from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_sql_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return 1 if value else 0
    return value


def as_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def as_date(value: Any) -> date:
    """DATETIME columns come back as datetime; DATE columns as date."""

    if isinstance(value, datetime):
        return value.date()
    return value


def build_set_clause(changes: Mapping[str, Any], columns: Mapping[str, str]) -> Tuple[str, List[Any]]:
    """Turn patch changes into ``col=%s, ...`` plus parameters.

    ``columns`` maps domain field names to column names.
    """

    parts: List[str] = []
    params: List[Any] = []
    for field_name, value in changes.items():
        parts.append(f"{columns[field_name]}=%s")
        params.append(to_sql_value(value))
    return ", ".join(parts), params
