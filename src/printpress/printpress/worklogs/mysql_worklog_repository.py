from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import LogStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, build_set_clause, db_cursor, fetchall, fetchone
from .model import WorkLog, WorkLogPatch
from .repository import WorkLogRepository

_SELECT = """
    SELECT id, employee_id, work_date, start_time, end_time, description, task_id, status, hours_worked
    FROM work_logs
"""

_COLUMNS = {
    "description": "description",
    "task_id": "task_id",
    "start_time": "start_time",
    "end_time": "end_time",
    "status": "status",
    "hours_worked": "hours_worked",
}


def _to_log(r: dict) -> WorkLog:
    return WorkLog(
        log_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        work_date=as_date(r["work_date"]),
        start_time=r["start_time"],
        end_time=r.get("end_time"),
        description=r.get("description") or "",
        task_id=str(r["task_id"]) if r.get("task_id") else None,
        status=LogStatus(r["status"]),
        hours_worked=as_decimal(r.get("hours_worked")),
    )


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, log_id: str) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (log_id,))
            row = fetchone(cur)
            return _to_log(row) if row else None

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        task_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[WorkLog]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if task_id is not None:
            clauses.append("task_id=%s")
            params.append(task_id)
        if work_date is not None:
            clauses.append("work_date=%s")
            params.append(work_date)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + where + " ORDER BY start_time DESC", tuple(params))
            return [_to_log(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        start_time: datetime,
        end_time: Optional[datetime],
        description: str,
        task_id: Optional[str],
        status: LogStatus,
        hours_worked: Decimal,
    ) -> str:
        log_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs(id, employee_id, work_date, start_time, end_time, description,
                                      task_id, status, hours_worked)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (log_id, employee_id, work_date, start_time, end_time, description, task_id, status.value, hours_worked),
            )
        return log_id

    def update(self, log_id: str, patch: WorkLogPatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(log_id) is not None

        set_clause, params = build_set_clause(changes, _COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE work_logs SET {set_clause} WHERE id=%s", (*params, log_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM work_logs WHERE id=%s", (log_id,))
            return fetchone(cur) is not None

    def delete(self, log_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_logs WHERE id=%s", (log_id,))
            return cur.rowcount > 0
