from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.constants import UPCOMING_TASKS_LIMIT
from ..core.enums import TaskPriority, TaskStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from ..worklogs.repository import WorkLogRepository
from .model import Task, TaskPatch
from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, tasks: TaskRepository, employees: EmployeeService, work_logs: WorkLogRepository):
        self._tasks = tasks
        self._employees = employees
        self._work_logs = work_logs

    def get(self, task_id: str) -> Task:
        task = self._tasks.get_by_id(task_id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def list(self, *, employee_id: Optional[str] = None, status: Optional[TaskStatus] = None) -> Sequence[Task]:
        return self._tasks.list_all(employee_id=employee_id, status=status)

    def upcoming(self, *, limit: int = UPCOMING_TASKS_LIMIT) -> Sequence[Task]:
        open_tasks = [t for t in self._tasks.list_all() if t.status != TaskStatus.COMPLETED]
        open_tasks.sort(key=lambda t: t.due_date)
        return open_tasks[:limit]

    def assign(
        self,
        *,
        employee_id: str,
        title: str,
        description: str,
        due_date: date,
        priority: TaskPriority,
        status: TaskStatus = TaskStatus.PENDING,
        assigned_date: Optional[date] = None,
    ) -> str:
        self._employees.require_active(employee_id)
        title = require_non_empty(title, "Title")
        assigned_date = assigned_date or now_local().date()
        if due_date < assigned_date:
            raise ValidationError("Due date cannot be before the assigned date")

        task_id = self._tasks.create(
            employee_id=employee_id,
            title=title,
            description=optional_text(description) or "",
            due_date=due_date,
            assigned_date=assigned_date,
            priority=priority,
            status=status,
        )
        logger.info("Task %s assigned to employee %s", task_id, employee_id)
        return task_id

    def update(self, task_id: str, patch: TaskPatch) -> Task:
        changes = patch.changes()
        if "employee_id" in changes:
            self._employees.require_active(changes["employee_id"])
        if not self._tasks.update(task_id, patch):
            raise NotFoundError("Task not found")
        return self.get(task_id)

    def mark_completed(self, task_id: str) -> Task:
        return self.update(task_id, TaskPatch(status=TaskStatus.COMPLETED))

    def delete(self, task_id: str) -> None:
        if not self._tasks.get_by_id(task_id):
            raise NotFoundError("Task not found")
        if self._work_logs.list_all(task_id=task_id):
            raise ValidationError("Task still has work logs attached")
        self._tasks.delete(task_id)
