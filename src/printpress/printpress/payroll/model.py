from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import SalaryType
from ..employees.model import Employee
from ..finance.model import Advance, SalaryDeduction
from ..worklogs.model import WorkLog


@dataclass(frozen=True)
class PayrollSnapshot:
    """Records the calculator reads; built once per request from the store."""

    employees: Sequence[Employee] = field(default_factory=tuple)
    work_logs: Sequence[WorkLog] = field(default_factory=tuple)
    advances: Sequence[Advance] = field(default_factory=tuple)
    deductions: Sequence[SalaryDeduction] = field(default_factory=tuple)

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        for employee in self.employees:
            if employee.employee_id == employee_id:
                return employee
        return None


@dataclass(frozen=True)
class PayrollBreakdown:
    employee_id: str
    month: int
    year: int
    base_pay: Decimal
    advances_total: Decimal
    deductions_total: Decimal

    @property
    def net(self) -> Decimal:
        return self.base_pay - self.advances_total - self.deductions_total


@dataclass(frozen=True)
class SalaryReportRow:
    employee_id: str
    name: str
    position: str
    salary_type: SalaryType
    base_rate: Decimal
    net_salary: Decimal
