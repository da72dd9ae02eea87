from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...common.datetime_utils import in_month
from ...core.enums import SalaryType
from ...finance.model import Advance
from ..model import PayrollBreakdown, PayrollSnapshot

ZERO = Decimal("0")


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Subclasses decide which unpaid advances count against a month; base pay
    and deductions are shared. Results are exact decimals, never rounded and
    never clamped at zero.
    """

    @abstractmethod
    def advance_applies(self, advance: Advance, month: int, year: int) -> bool:
        raise NotImplementedError

    def breakdown(self, snapshot: PayrollSnapshot, employee_id: str, month: int, year: int) -> PayrollBreakdown:
        employee = snapshot.find_employee(employee_id)
        if employee is None:
            return PayrollBreakdown(employee_id, month, year, ZERO, ZERO, ZERO)

        if employee.salary_type == SalaryType.MONTHLY:
            base_pay = employee.salary_rate
        else:
            hours = sum(
                (
                    log.hours_worked
                    for log in snapshot.work_logs
                    if log.employee_id == employee_id and in_month(log.work_date, month, year)
                ),
                ZERO,
            )
            base_pay = hours * employee.salary_rate

        advances_total = sum(
            (
                a.amount
                for a in snapshot.advances
                if a.employee_id == employee_id and not a.is_paid and self.advance_applies(a, month, year)
            ),
            ZERO,
        )
        deductions_total = sum(
            (
                d.amount
                for d in snapshot.deductions
                if d.employee_id == employee_id and in_month(d.deduction_date, month, year)
            ),
            ZERO,
        )
        return PayrollBreakdown(employee_id, month, year, base_pay, advances_total, deductions_total)

    def net_balance(self, snapshot: PayrollSnapshot, employee_id: str, month: int, year: int) -> Decimal:
        return self.breakdown(snapshot, employee_id, month, year).net
