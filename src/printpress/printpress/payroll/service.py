from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..employees.repository import EmployeeRepository
from ..finance.repository import AdvanceRepository, DeductionRepository
from ..worklogs.repository import WorkLogRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollBreakdown, PayrollSnapshot, SalaryReportRow

logger = logging.getLogger(__name__)


class PayrollService:
    """Use case: net salary balances and the monthly salary report.

    Reads records through the repositories, then hands an in-memory
    snapshot to the calculator so the arithmetic stays pure.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        work_logs: WorkLogRepository,
        advances: AdvanceRepository,
        deductions: DeductionRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._work_logs = work_logs
        self._advances = advances
        self._deductions = deductions
        self._calculator = calculator or StandardPayrollCalculator()

    @property
    def calculator(self) -> PayrollCalculator:
        return self._calculator

    def snapshot(self, employee_id: Optional[str] = None) -> PayrollSnapshot:
        if employee_id is None:
            employees = tuple(self._employees.list_all())
        else:
            employee = self._employees.get_by_id(employee_id)
            employees = (employee,) if employee else ()

        return PayrollSnapshot(
            employees=employees,
            work_logs=tuple(self._work_logs.list_all(employee_id=employee_id)),
            advances=tuple(self._advances.list_all(employee_id=employee_id, is_paid=False)),
            deductions=tuple(self._deductions.list_all(employee_id=employee_id)),
        )

    def breakdown(self, employee_id: str, month: int, year: int) -> PayrollBreakdown:
        return self._calculator.breakdown(self.snapshot(employee_id), employee_id, month, year)

    def compute_net_balance(self, employee_id: str, month: int, year: int) -> Decimal:
        """Net balance for one employee; unknown employees yield 0."""

        return self.breakdown(employee_id, month, year).net

    def build_salary_report(self, month: int, year: int) -> list[SalaryReportRow]:
        snapshot = self.snapshot()
        rows: list[SalaryReportRow] = []
        for employee in snapshot.employees:
            if not employee.is_active:
                continue
            rows.append(
                SalaryReportRow(
                    employee_id=employee.employee_id,
                    name=employee.name,
                    position=employee.position,
                    salary_type=employee.salary_type,
                    base_rate=employee.salary_rate,
                    net_salary=self._calculator.net_balance(snapshot, employee.employee_id, month, year),
                )
            )
        logger.info("Salary report built for %02d/%s (%s employees)", month + 1, year, len(rows))
        return rows
