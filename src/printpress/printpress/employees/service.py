from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_negative
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeePatch, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def list(self, *, status: Optional[EmployeeStatus] = None) -> Sequence[Employee]:
        return self._employees.list_all(status=status)

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_all(status=EmployeeStatus.ACTIVE)

    def require_active(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee does not exist")
        if not employee.is_active:
            raise ValidationError("Employee is inactive")
        return employee

    def create(self, employee: NewEmployee) -> str:
        require_non_negative(employee.salary_rate, "Salary rate")
        employee_id = self._employees.create(employee)
        logger.info("Employee %s created (%s, %s)", employee_id, employee.name, employee.salary_type.value)
        return employee_id

    def update(self, employee_id: str, patch: EmployeePatch) -> Employee:
        changes = patch.changes()
        if "salary_rate" in changes:
            require_non_negative(changes["salary_rate"], "Salary rate")
        if not self._employees.update(employee_id, patch):
            raise NotFoundError("Employee not found")
        return self.get(employee_id)

    def deactivate(self, employee_id: str) -> None:
        """Soft delete: employees stay in the store for payroll history."""

        self.update(employee_id, EmployeePatch(status=EmployeeStatus.INACTIVE))
        logger.info("Employee %s deactivated", employee_id)

    def reactivate(self, employee_id: str) -> None:
        self.update(employee_id, EmployeePatch(status=EmployeeStatus.ACTIVE))
        logger.info("Employee %s reactivated", employee_id)
