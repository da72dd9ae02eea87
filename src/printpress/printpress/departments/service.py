from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Department, DepartmentPatch
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    def __init__(self, departments: DepartmentRepository, employees: EmployeeRepository):
        self._departments = departments
        self._employees = employees

    def get(self, department_id: str) -> Department:
        department = self._departments.get_by_id(department_id)
        if not department:
            raise NotFoundError("Department not found")
        return department

    def list(self) -> Sequence[Department]:
        return self._departments.list_all()

    def create(self, *, name: str, description: str = "") -> str:
        name = require_non_empty(name, "Department name")
        if any(d.name.lower() == name.lower() for d in self._departments.list_all()):
            raise ValidationError("Department already exists")
        return self._departments.create(name=name, description=optional_text(description) or "")

    def update(self, department_id: str, patch: DepartmentPatch) -> Department:
        if not self._departments.update(department_id, patch):
            raise NotFoundError("Department not found")
        return self._departments.get_by_id(department_id)

    def delete(self, department_id: str) -> None:
        department = self._departments.get_by_id(department_id)
        if not department:
            raise NotFoundError("Department not found")

        in_use = [e for e in self._employees.list_all() if e.department == department.name]
        if in_use:
            logger.warning("Refused to delete department %s: %d employee(s) assigned", department.name, len(in_use))
            raise ValidationError("Department still has employees assigned")

        self._departments.delete(department_id)
