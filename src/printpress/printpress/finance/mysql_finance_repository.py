from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.ids import new_id
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, build_set_clause, db_cursor, fetchall, fetchone
from .model import Advance, AdvancePatch, DeductionPatch, SalaryDeduction
from .repository import AdvanceRepository, DeductionRepository

logger = logging.getLogger(__name__)

_ADVANCE_SELECT = "SELECT id, employee_id, amount, advance_date, description, is_paid FROM advances"
_DEDUCTION_SELECT = "SELECT id, employee_id, amount, deduction_date, reason, advance_id FROM salary_deductions"


def _to_advance(r: dict) -> Advance:
    return Advance(
        advance_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        amount=as_decimal(r["amount"]),
        advance_date=as_date(r["advance_date"]),
        description=r.get("description") or "",
        is_paid=bool(r.get("is_paid")),
    )


def _to_deduction(r: dict) -> SalaryDeduction:
    return SalaryDeduction(
        deduction_id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        amount=as_decimal(r["amount"]),
        deduction_date=as_date(r["deduction_date"]),
        reason=r.get("reason") or "",
        advance_id=str(r["advance_id"]) if r.get("advance_id") else None,
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_ADVANCE_SELECT + " WHERE id=%s", (advance_id,))
            row = fetchone(cur)
            return _to_advance(row) if row else None

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        is_paid: Optional[bool] = None,
    ) -> Sequence[Advance]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if is_paid is not None:
            clauses.append("is_paid=%s")
            params.append(1 if is_paid else 0)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_ADVANCE_SELECT + where + " ORDER BY advance_date DESC", tuple(params))
            return [_to_advance(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        advance_date: date,
        description: str = "",
        is_paid: bool = False,
    ) -> str:
        advance_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO advances(id, employee_id, amount, advance_date, description, is_paid)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (advance_id, employee_id, amount, advance_date, description, 1 if is_paid else 0),
            )
        return advance_id

    def update(self, advance_id: str, patch: AdvancePatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(advance_id) is not None

        set_clause, params = build_set_clause(
            changes,
            {"amount": "amount", "advance_date": "advance_date", "description": "description", "is_paid": "is_paid"},
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE advances SET {set_clause} WHERE id=%s", (*params, advance_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM advances WHERE id=%s", (advance_id,))
            return fetchone(cur) is not None

    def delete(self, advance_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM advances WHERE id=%s", (advance_id,))
            return cur.rowcount > 0


class MySQLDeductionRepository(DeductionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, deduction_id: str) -> Optional[SalaryDeduction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_DEDUCTION_SELECT + " WHERE id=%s", (deduction_id,))
            row = fetchone(cur)
            return _to_deduction(row) if row else None

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        advance_id: Optional[str] = None,
    ) -> Sequence[SalaryDeduction]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if advance_id is not None:
            clauses.append("advance_id=%s")
            params.append(advance_id)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_DEDUCTION_SELECT + where + " ORDER BY deduction_date DESC", tuple(params))
            return [_to_deduction(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        deduction_date: date,
        reason: str = "",
        advance_id: Optional[str] = None,
    ) -> str:
        deduction_id = new_id()
        # One transaction: either both rows change or neither does.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_deductions(id, employee_id, amount, deduction_date, reason, advance_id)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (deduction_id, employee_id, amount, deduction_date, reason, advance_id),
            )
            if advance_id:
                cur.execute("UPDATE advances SET is_paid=1 WHERE id=%s", (advance_id,))
                if cur.rowcount == 0:
                    logger.warning("Deduction %s references advance %s but no advance row was updated", deduction_id, advance_id)
        return deduction_id

    def update(self, deduction_id: str, patch: DeductionPatch) -> bool:
        changes = patch.changes()
        if not changes:
            return self.get_by_id(deduction_id) is not None

        set_clause, params = build_set_clause(
            changes,
            {"amount": "amount", "deduction_date": "deduction_date", "reason": "reason"},
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE salary_deductions SET {set_clause} WHERE id=%s", (*params, deduction_id))
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS ok FROM salary_deductions WHERE id=%s", (deduction_id,))
            return fetchone(cur) is not None

    def delete(self, deduction_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_deductions WHERE id=%s", (deduction_id,))
            return cur.rowcount > 0
