from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import hours_between, now_local
from ..common.validators import optional_text, require_non_negative
from ..core.enums import LogStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from ..tasks.repository import TaskRepository
from .model import WorkLog, WorkLogPatch
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)


class WorkLogService:
    """Use case: track worked shifts (hours feed hourly payroll)."""

    def __init__(self, work_logs: WorkLogRepository, employees: EmployeeService, tasks: TaskRepository):
        self._work_logs = work_logs
        self._employees = employees
        self._tasks = tasks

    def get(self, log_id: str) -> WorkLog:
        log = self._work_logs.get_by_id(log_id)
        if not log:
            raise NotFoundError("Work log not found")
        return log

    def list(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[WorkLog]:
        return self._work_logs.list_all(employee_id=employee_id, work_date=work_date)

    def _check_task(self, task_id: Optional[str]) -> Optional[str]:
        if task_id and not self._tasks.get_by_id(task_id):
            raise ValidationError("Task does not exist")
        return task_id

    def start_work(
        self,
        employee_id: str,
        *,
        description: str = "",
        task_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        now = now or now_local()
        self._employees.require_active(employee_id)
        self._check_task(task_id)

        if any(log.is_open for log in self._work_logs.list_all(employee_id=employee_id)):
            raise ValidationError("Employee already has an open shift")

        log_id = self._work_logs.create(
            employee_id=employee_id,
            work_date=now.date(),
            start_time=now,
            end_time=None,
            description=optional_text(description) or "",
            task_id=task_id,
            status=LogStatus.PENDING,
            hours_worked=Decimal("0"),
        )
        logger.info("Shift %s started for employee %s", log_id, employee_id)
        return log_id

    def finish_work(self, log_id: str, *, now: Optional[datetime] = None) -> WorkLog:
        now = now or now_local()
        log = self.get(log_id)
        if not log.is_open:
            raise ValidationError("Shift already finished")
        if now < log.start_time:
            raise ValidationError("End time cannot be before start time")

        self._work_logs.update(
            log_id,
            WorkLogPatch(end_time=now, status=LogStatus.FINISHED, hours_worked=hours_between(log.start_time, now)),
        )
        logger.info("Shift %s finished for employee %s", log_id, log.employee_id)
        return self.get(log_id)

    def record(
        self,
        *,
        employee_id: str,
        start_time: datetime,
        end_time: Optional[datetime],
        description: str = "",
        task_id: Optional[str] = None,
    ) -> str:
        """Manual entry; hours are derived from start/end."""

        self._employees.require_active(employee_id)
        self._check_task(task_id)
        if end_time is not None and end_time < start_time:
            raise ValidationError("End time cannot be before start time")

        return self._work_logs.create(
            employee_id=employee_id,
            work_date=start_time.date(),
            start_time=start_time,
            end_time=end_time,
            description=optional_text(description) or "",
            task_id=task_id,
            status=LogStatus.FINISHED if end_time else LogStatus.PENDING,
            hours_worked=hours_between(start_time, end_time) if end_time else Decimal("0"),
        )

    def update(self, log_id: str, patch: WorkLogPatch) -> WorkLog:
        current = self.get(log_id)
        changes = patch.changes()
        self._check_task(changes.get("task_id"))
        if "hours_worked" in changes:
            require_non_negative(changes["hours_worked"], "Hours worked")

        updated = patch.apply(current)
        if updated.end_time is not None and updated.end_time < updated.start_time:
            raise ValidationError("End time cannot be before start time")

        if ("start_time" in changes or "end_time" in changes) and "hours_worked" not in changes:
            hours = hours_between(updated.start_time, updated.end_time) if updated.end_time else Decimal("0")
            patch = WorkLogPatch(**changes, hours_worked=hours)

        self._work_logs.update(log_id, patch)
        return self.get(log_id)

    def delete(self, log_id: str) -> None:
        if not self._work_logs.delete(log_id):
            raise NotFoundError("Work log not found")
