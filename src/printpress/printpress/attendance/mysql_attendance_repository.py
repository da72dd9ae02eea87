from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, build_set_clause, db_cursor, fetchall, fetchone
from .model import AttendancePatch, AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT id, employee_id, work_date, check_in, check_out, status, notes
    FROM attendance
"""

_COLUMNS = {
    "work_date": "work_date",
    "check_in": "check_in",
    "check_out": "check_out",
    "status": "status",
    "notes": "notes",
}


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        work_date=as_date(r["work_date"]),
        check_in=r["check_in"],
        check_out=r.get("check_out"),
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes") or "",
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (attendance_id,))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if work_date is not None:
            clauses.append("work_date=%s")
            params.append(work_date)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + where + " ORDER BY work_date DESC, check_in DESC", tuple(params))
            return [_to_record(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime],
        status: AttendanceStatus,
        notes: str = "",
    ) -> str:
        attendance_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(id, employee_id, work_date, check_in, check_out, status, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (attendance_id, employee_id, work_date, check_in, check_out, status.value, notes),
            )
        return attendance_id

    def update(self, attendance_id: str, patch: AttendancePatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(attendance_id) is not None

        set_clause, params = build_set_clause(changes, _COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE attendance SET {set_clause} WHERE id=%s", (*params, attendance_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM attendance WHERE id=%s", (attendance_id,))
            return fetchone(cur) is not None

    def delete(self, attendance_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (attendance_id,))
            return cur.rowcount > 0
