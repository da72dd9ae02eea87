from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, DepartmentPatch


class DepartmentRepository(Protocol):
    def get_by_id(self, department_id: str) -> Optional[Department]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def create(self, *, name: str, description: str = "") -> str:
        raise NotImplementedError

    def update(self, department_id: str, patch: DepartmentPatch) -> bool:
        raise NotImplementedError

    def delete(self, department_id: str) -> bool:
        raise NotImplementedError
