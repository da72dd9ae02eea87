from __future__ import annotations

from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import EmployeeStatus
from ..storage.local_base import LocalRepositoryBase
from .model import Employee, EmployeePatch, NewEmployee
from .repository import EmployeeRepository


class LocalEmployeeRepository(LocalRepositoryBase[Employee], EmployeeRepository):
    collection = "employees"
    key = "employee_id"

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._find(employee_id)

    def list_all(self, *, status: Optional[EmployeeStatus] = None) -> Sequence[Employee]:
        items = self._filter(lambda e: status is None or e.status == status)
        return sorted(items, key=lambda e: e.name)

    def create(self, employee: NewEmployee) -> str:
        return self._insert(
            Employee(
                employee_id=new_id(),
                name=employee.name,
                department=employee.department,
                position=employee.position,
                phone=employee.phone,
                email=employee.email,
                joining_date=employee.joining_date,
                employment_type=employee.employment_type,
                salary_type=employee.salary_type,
                salary_rate=employee.salary_rate,
                status=EmployeeStatus.ACTIVE,
            )
        )

    def update(self, employee_id: str, patch: EmployeePatch) -> bool:
        return self._patch(employee_id, patch)
