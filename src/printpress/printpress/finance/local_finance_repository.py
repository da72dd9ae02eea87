from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.ids import new_id
from ..storage.local_base import LocalRepositoryBase
from .model import Advance, AdvancePatch, DeductionPatch, SalaryDeduction
from .repository import AdvanceRepository, DeductionRepository

logger = logging.getLogger(__name__)


class LocalAdvanceRepository(LocalRepositoryBase[Advance], AdvanceRepository):
    collection = "advances"
    key = "advance_id"

    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        return self._find(advance_id)

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        is_paid: Optional[bool] = None,
    ) -> Sequence[Advance]:
        items = self._filter(
            lambda a: employee_id is None or a.employee_id == employee_id,
            lambda a: is_paid is None or a.is_paid == is_paid,
        )
        return sorted(items, key=lambda a: a.advance_date, reverse=True)

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        advance_date: date,
        description: str = "",
        is_paid: bool = False,
    ) -> str:
        return self._insert(
            Advance(
                advance_id=new_id(),
                employee_id=employee_id,
                amount=amount,
                advance_date=advance_date,
                description=description,
                is_paid=is_paid,
            )
        )

    def update(self, advance_id: str, patch: AdvancePatch) -> bool:
        return self._patch(advance_id, patch)

    def delete(self, advance_id: str) -> bool:
        return self._remove(advance_id)


class LocalDeductionRepository(LocalRepositoryBase[SalaryDeduction], DeductionRepository):
    collection = "deductions"
    key = "deduction_id"

    def get_by_id(self, deduction_id: str) -> Optional[SalaryDeduction]:
        return self._find(deduction_id)

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        advance_id: Optional[str] = None,
    ) -> Sequence[SalaryDeduction]:
        items = self._filter(
            lambda d: employee_id is None or d.employee_id == employee_id,
            lambda d: advance_id is None or d.advance_id == advance_id,
        )
        return sorted(items, key=lambda d: d.deduction_date, reverse=True)

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        deduction_date: date,
        reason: str = "",
        advance_id: Optional[str] = None,
    ) -> str:
        deduction = SalaryDeduction(
            deduction_id=new_id(),
            employee_id=employee_id,
            amount=amount,
            deduction_date=deduction_date,
            reason=reason,
            advance_id=advance_id,
        )
        self._items().append(deduction)

        if advance_id:
            advances = self._store.state.advances
            for i, advance in enumerate(advances):
                if advance.advance_id == advance_id:
                    advances[i] = replace(advance, is_paid=True)
                    break
            else:
                logger.warning(
                    "Deduction %s references advance %s but no advance was updated",
                    deduction.deduction_id,
                    advance_id,
                )

        # Single save covers both changes.
        self._store.save()
        return deduction.deduction_id

    def update(self, deduction_id: str, patch: DeductionPatch) -> bool:
        return self._patch(deduction_id, patch)

    def delete(self, deduction_id: str) -> bool:
        return self._remove(deduction_id)
