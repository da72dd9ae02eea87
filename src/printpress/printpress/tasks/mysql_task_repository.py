from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import TaskPriority, TaskStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, build_set_clause, db_cursor, fetchall, fetchone
from .model import Task, TaskPatch
from .repository import TaskRepository

_SELECT = """
    SELECT id, employee_id, title, description, due_date, assigned_date, priority, status
    FROM tasks
"""

_COLUMNS = {
    "employee_id": "employee_id",
    "title": "title",
    "description": "description",
    "due_date": "due_date",
    "priority": "priority",
    "status": "status",
}


def _to_task(r: dict) -> Task:
    return Task(
        task_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        title=r["title"],
        description=r.get("description") or "",
        due_date=as_date(r["due_date"]),
        assigned_date=as_date(r["assigned_date"]),
        priority=TaskPriority(r["priority"]),
        status=TaskStatus(r["status"]),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, task_id: str) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (task_id,))
            row = fetchone(cur)
            return _to_task(row) if row else None

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Sequence[Task]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + where + " ORDER BY due_date ASC", tuple(params))
            return [_to_task(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        title: str,
        description: str,
        due_date: date,
        assigned_date: date,
        priority: TaskPriority,
        status: TaskStatus,
    ) -> str:
        task_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(id, employee_id, title, description, due_date, assigned_date, priority, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (task_id, employee_id, title, description, due_date, assigned_date, priority.value, status.value),
            )
        return task_id

    def update(self, task_id: str, patch: TaskPatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(task_id) is not None

        set_clause, params = build_set_clause(changes, _COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE tasks SET {set_clause} WHERE id=%s", (*params, task_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM tasks WHERE id=%s", (task_id,))
            return fetchone(cur) is not None

    def delete(self, task_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE id=%s", (task_id,))
            return cur.rowcount > 0
