from __future__ import annotations

from typing import Optional, Sequence

from ..common.ids import new_id
from ..storage.local_base import LocalRepositoryBase
from .model import Department, DepartmentPatch
from .repository import DepartmentRepository


class LocalDepartmentRepository(LocalRepositoryBase[Department], DepartmentRepository):
    collection = "departments"
    key = "department_id"

    def get_by_id(self, department_id: str) -> Optional[Department]:
        return self._find(department_id)

    def list_all(self) -> Sequence[Department]:
        return sorted(self._items(), key=lambda d: d.name)

    def create(self, *, name: str, description: str = "") -> str:
        return self._insert(Department(department_id=new_id(), name=name, description=description))

    def update(self, department_id: str, patch: DepartmentPatch) -> bool:
        return self._patch(department_id, patch)

    def delete(self, department_id: str) -> bool:
        return self._remove(department_id)
