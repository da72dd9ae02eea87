from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee, EmployeePatch, NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note: services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[EmployeeStatus] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, employee: NewEmployee) -> str:
        raise NotImplementedError

    def update(self, employee_id: str, patch: EmployeePatch) -> bool:
        raise NotImplementedError
