from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import TaskPriority, TaskStatus
from ..storage.local_base import LocalRepositoryBase
from .model import Task, TaskPatch
from .repository import TaskRepository


class LocalTaskRepository(LocalRepositoryBase[Task], TaskRepository):
    collection = "tasks"
    key = "task_id"

    def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._find(task_id)

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Sequence[Task]:
        items = self._filter(
            lambda t: employee_id is None or t.employee_id == employee_id,
            lambda t: status is None or t.status == status,
        )
        return sorted(items, key=lambda t: t.due_date)

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
        return self._insert(
            Task(
                task_id=new_id(),
                employee_id=employee_id,
                title=title,
                description=description,
                due_date=due_date,
                assigned_date=assigned_date,
                priority=priority,
                status=status,
            )
        )

    def update(self, task_id: str, patch: TaskPatch) -> bool:
        return self._patch(task_id, patch)

    def delete(self, task_id: str) -> bool:
        return self._remove(task_id)
