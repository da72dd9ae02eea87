from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import TaskPriority, TaskStatus
from .model import Task, TaskPatch


class TaskRepository(Protocol):
    def get_by_id(self, task_id: str) -> Optional[Task]:
        raise NotImplementedError

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Sequence[Task]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        title: str,
        description: str,
        due_date: date,
        assigned_date: date,
        priority: TaskPriority,
        status: TaskStatus,
    ) -> str:
        raise NotImplementedError

    def update(self, task_id: str, patch: TaskPatch) -> bool:
        raise NotImplementedError

    def delete(self, task_id: str) -> bool:
        raise NotImplementedError
