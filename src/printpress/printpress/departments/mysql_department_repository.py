from __future__ import annotations

from typing import Optional, Sequence

from ..common.ids import new_id
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_set_clause, db_cursor, fetchall, fetchone
from .model import Department, DepartmentPatch
from .repository import DepartmentRepository


def _to_department(r: dict) -> Department:
    return Department(department_id=str(r["id"]), name=r["name"], description=r.get("description") or "")


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, department_id: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, description FROM departments WHERE id=%s", (department_id,))
            row = fetchone(cur)
            return _to_department(row) if row else None

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, description FROM departments ORDER BY name")
            return [_to_department(r) for r in fetchall(cur)]

    def create(self, *, name: str, description: str = "") -> str:
        department_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO departments(id, name, description) VALUES(%s,%s,%s)",
                (department_id, name, description),
            )
        return department_id

    def update(self, department_id: str, patch: DepartmentPatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(department_id) is not None

        set_clause, params = build_set_clause(changes, {"name": "name", "description": "description"})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE departments SET {set_clause} WHERE id=%s", (*params, department_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM departments WHERE id=%s", (department_id,))
            return fetchone(cur) is not None

    def delete(self, department_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE id=%s", (department_id,))
            return cur.rowcount > 0
