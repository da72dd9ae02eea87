from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Advance, AdvancePatch, DeductionPatch, SalaryDeduction


class AdvanceRepository(Protocol):
    def get_by_id(self, advance_id: str) -> Optional[Advance]:
        raise NotImplementedError

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        is_paid: Optional[bool] = None,
    ) -> Sequence[Advance]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        advance_date: date,
        description: str = "",
        is_paid: bool = False,
    ) -> str:
        raise NotImplementedError

    def update(self, advance_id: str, patch: AdvancePatch) -> bool:
        raise NotImplementedError

    def delete(self, advance_id: str) -> bool:
        raise NotImplementedError


class DeductionRepository(Protocol):
    def get_by_id(self, deduction_id: str) -> Optional[SalaryDeduction]:
        raise NotImplementedError

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        advance_id: Optional[str] = None,
    ) -> Sequence[SalaryDeduction]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        deduction_date: date,
        reason: str = "",
        advance_id: Optional[str] = None,
    ) -> str:
        """Insert a deduction.

        When ``advance_id`` is given the referenced advance is marked paid as
        part of the same store write (insert first, then the advance update).
        """

        raise NotImplementedError

    def update(self, deduction_id: str, patch: DeductionPatch) -> bool:
        raise NotImplementedError

    def delete(self, deduction_id: str) -> bool:
        raise NotImplementedError
