from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import in_month
from ..common.validators import optional_text, require_month_index, require_positive_amount, require_year
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from .model import Advance, AdvancePatch, DeductionPatch, MonthlyFinanceSummary, SalaryDeduction
from .repository import AdvanceRepository, DeductionRepository

logger = logging.getLogger(__name__)


class FinanceService:
    """Use case: salary advances and the deductions that settle them."""

    def __init__(
        self,
        advances: AdvanceRepository,
        deductions: DeductionRepository,
        employees: EmployeeService,
    ):
        self._advances = advances
        self._deductions = deductions
        self._employees = employees

    # ---- advances ----

    def get_advance(self, advance_id: str) -> Advance:
        advance = self._advances.get_by_id(advance_id)
        if not advance:
            raise NotFoundError("Advance not found")
        return advance

    def list_advances(self, *, employee_id: Optional[str] = None, is_paid: Optional[bool] = None) -> Sequence[Advance]:
        return self._advances.list_all(employee_id=employee_id, is_paid=is_paid)

    def record_advance(self, *, employee_id: str, amount: Decimal, advance_date: date, description: str = "") -> str:
        self._employees.require_active(employee_id)
        require_positive_amount(amount, "Amount")

        advance_id = self._advances.create(
            employee_id=employee_id,
            amount=amount,
            advance_date=advance_date,
            description=optional_text(description) or "",
        )
        logger.info("Advance %s of %s recorded for employee %s", advance_id, amount, employee_id)
        return advance_id

    def update_advance(self, advance_id: str, patch: AdvancePatch) -> Advance:
        changes = patch.changes()
        if "amount" in changes:
            require_positive_amount(changes["amount"], "Amount")
        if not self._advances.update(advance_id, patch):
            raise NotFoundError("Advance not found")
        return self.get_advance(advance_id)

    def delete_advance(self, advance_id: str) -> None:
        self.get_advance(advance_id)
        if self._deductions.list_all(advance_id=advance_id):
            logger.warning("Refused to delete advance %s: deductions reference it", advance_id)
            raise ValidationError("Advance is referenced by a salary deduction")
        self._advances.delete(advance_id)

    # ---- deductions ----

    def get_deduction(self, deduction_id: str) -> SalaryDeduction:
        deduction = self._deductions.get_by_id(deduction_id)
        if not deduction:
            raise NotFoundError("Deduction not found")
        return deduction

    def list_deductions(self, *, employee_id: Optional[str] = None) -> Sequence[SalaryDeduction]:
        return self._deductions.list_all(employee_id=employee_id)

    def record_deduction(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        deduction_date: date,
        reason: str = "",
        advance_id: Optional[str] = None,
    ) -> str:
        """Store a deduction; a referenced advance is settled in the same write."""

        self._employees.require_active(employee_id)
        require_positive_amount(amount, "Amount")

        if advance_id:
            advance = self._advances.get_by_id(advance_id)
            if not advance:
                raise ValidationError("Advance does not exist")
            if advance.employee_id != employee_id:
                raise ValidationError("Advance belongs to another employee")
            if advance.is_paid:
                raise ValidationError("Advance is already paid")

        deduction_id = self._deductions.create(
            employee_id=employee_id,
            amount=amount,
            deduction_date=deduction_date,
            reason=optional_text(reason) or "",
            advance_id=advance_id or None,
        )
        logger.info("Deduction %s of %s recorded for employee %s", deduction_id, amount, employee_id)

        if advance_id:
            settled = self._advances.get_by_id(advance_id)
            if not settled or not settled.is_paid:
                logger.error(
                    "Deduction %s stored but advance %s was not marked paid",
                    deduction_id,
                    advance_id,
                )
        return deduction_id

    def update_deduction(self, deduction_id: str, patch: DeductionPatch) -> SalaryDeduction:
        changes = patch.changes()
        if "amount" in changes:
            require_positive_amount(changes["amount"], "Amount")
        if not self._deductions.update(deduction_id, patch):
            raise NotFoundError("Deduction not found")
        return self.get_deduction(deduction_id)

    def delete_deduction(self, deduction_id: str) -> None:
        """Settled advances stay paid after their deduction is removed."""

        if not self._deductions.delete(deduction_id):
            raise NotFoundError("Deduction not found")

    # ---- reports ----

    def monthly_summary(self, *, month: int, year: int, employee_id: Optional[str] = None) -> MonthlyFinanceSummary:
        month = require_month_index(month)
        year = require_year(year)

        advances = [a for a in self._advances.list_all(employee_id=employee_id) if in_month(a.advance_date, month, year)]
        deductions = [
            d for d in self._deductions.list_all(employee_id=employee_id) if in_month(d.deduction_date, month, year)
        ]
        return MonthlyFinanceSummary(
            employee_id=employee_id,
            month=month,
            year=year,
            advances=advances,
            deductions=deductions,
            total_advances=sum((a.amount for a in advances), Decimal("0")),
            total_deductions=sum((d.amount for d in deductions), Decimal("0")),
        )
