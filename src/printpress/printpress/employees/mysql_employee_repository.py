from __future__ import annotations

from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import EmployeeStatus, EmploymentType, SalaryType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, build_set_clause, db_cursor, fetchall, fetchone
from .model import Employee, EmployeePatch, NewEmployee
from .repository import EmployeeRepository

_SELECT = """
    SELECT id, name, department, position, phone, email, joining_date,
           employment_type, salary_type, salary_rate, status
    FROM employees
"""

_COLUMNS = {
    "name": "name",
    "department": "department",
    "position": "position",
    "phone": "phone",
    "email": "email",
    "joining_date": "joining_date",
    "employment_type": "employment_type",
    "salary_type": "salary_type",
    "salary_rate": "salary_rate",
    "status": "status",
}


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        name=r["name"],
        department=r["department"],
        position=r.get("position") or "",
        phone=r.get("phone") or "",
        email=r.get("email") or "",
        joining_date=as_date(r["joining_date"]),
        employment_type=EmploymentType(r["employment_type"]),
        salary_type=SalaryType(r["salary_type"]),
        salary_rate=as_decimal(r["salary_rate"]),
        status=EmployeeStatus(r["status"]),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self, *, status: Optional[EmployeeStatus] = None) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if status is None:
                cur.execute(_SELECT + " ORDER BY name")
            else:
                cur.execute(_SELECT + " WHERE status=%s ORDER BY name", (status.value,))
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: NewEmployee) -> str:
        employee_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(id, name, department, position, phone, email, joining_date,
                                      employment_type, salary_type, salary_rate, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee_id,
                    employee.name,
                    employee.department,
                    employee.position,
                    employee.phone,
                    employee.email,
                    employee.joining_date,
                    employee.employment_type.value,
                    employee.salary_type.value,
                    employee.salary_rate,
                    EmployeeStatus.ACTIVE.value,
                ),
            )
        return employee_id

    def update(self, employee_id: str, patch: EmployeePatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(employee_id) is not None

        set_clause, params = build_set_clause(changes, _COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET {set_clause} WHERE id=%s", (*params, employee_id))
            # MySQL reports 0 affected rows when values are unchanged; fall back to existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM employees WHERE id=%s", (employee_id,))
            return fetchone(cur) is not None
