from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, parse_bool, parse_date, parse_decimal


@dataclass(frozen=True)
class Advance:
    """Money handed to an employee ahead of payroll.

    ``is_paid`` flips to True once a salary deduction settles it.
    """

    advance_id: str
    employee_id: str
    amount: Decimal
    advance_date: date
    description: str = ""
    is_paid: bool = False


@dataclass(frozen=True)
class SalaryDeduction:
    deduction_id: str
    employee_id: str
    amount: Decimal
    deduction_date: date
    reason: str = ""
    advance_id: Optional[str] = None


@dataclass(frozen=True)
class AdvancePatch(Patch):
    amount: Optional[Decimal] = UNSET
    advance_date: Optional[date] = UNSET
    description: Optional[str] = UNSET
    is_paid: Optional[bool] = UNSET

    converters = {
        "amount": lambda v: parse_decimal(v, "Amount"),
        "advance_date": lambda v: parse_date(v, "Date"),
        "description": lambda v: optional_text(v) or "",
        "is_paid": lambda v: parse_bool(v, "Paid"),
    }


@dataclass(frozen=True)
class DeductionPatch(Patch):
    """Deductions keep their advance link; only the money fields change."""

    amount: Optional[Decimal] = UNSET
    deduction_date: Optional[date] = UNSET
    reason: Optional[str] = UNSET

    converters = {
        "amount": lambda v: parse_decimal(v, "Amount"),
        "deduction_date": lambda v: parse_date(v, "Date"),
        "reason": lambda v: optional_text(v) or "",
    }


@dataclass(frozen=True)
class MonthlyFinanceSummary:
    employee_id: Optional[str]
    month: int
    year: int
    advances: list[Advance]
    deductions: list[SalaryDeduction]
    total_advances: Decimal
    total_deductions: Decimal
