from __future__ import annotations

from typing import Optional

from ..common.ids import new_id
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CompanyInfo
from .repository import CompanyInfoRepository


class MySQLCompanyInfoRepository(CompanyInfoRepository):
    """The company_info table holds a single row."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[CompanyInfo]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, address, logo FROM company_info ORDER BY created_at ASC LIMIT 1")
            row = fetchone(cur)
            if not row:
                return None
            return CompanyInfo(name=row["name"], address=row["address"], logo=row.get("logo"))

    def save(self, info: CompanyInfo) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM company_info ORDER BY created_at ASC LIMIT 1")
            row = fetchone(cur)
            if row:
                cur.execute(
                    "UPDATE company_info SET name=%s, address=%s, logo=%s WHERE id=%s",
                    (info.name, info.address, info.logo, row["id"]),
                )
            else:
                cur.execute(
                    "INSERT INTO company_info(id, name, address, logo) VALUES(%s,%s,%s,%s)",
                    (new_id(), info.name, info.address, info.logo),
                )
