from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import RECENT_ACTIVITY_LIMIT, UPCOMING_TASKS_LIMIT
from ..core.enums import EmployeeStatus, TaskStatus
from ..employees.repository import EmployeeRepository
from ..finance.repository import AdvanceRepository
from ..tasks.repository import TaskRepository
from ..worklogs.repository import WorkLogRepository
from .model import ActivityItem, DashboardSummary


def _at_midnight(value: date) -> datetime:
    return datetime.combine(value, time.min)


class DashboardService:
    def __init__(
        self,
        employees: EmployeeRepository,
        tasks: TaskRepository,
        work_logs: WorkLogRepository,
        advances: AdvanceRepository,
    ):
        self._employees = employees
        self._tasks = tasks
        self._work_logs = work_logs
        self._advances = advances

    def summary(self, *, today: Optional[date] = None) -> DashboardSummary:
        today = today or now_local().date()

        employees = self._employees.list_all()
        names = {e.employee_id: e.name for e in employees}
        tasks = self._tasks.list_all()
        logs = self._work_logs.list_all()
        todays_logs = [log for log in logs if log.work_date == today]

        activity: list[ActivityItem] = []
        for task in tasks:
            activity.append(
                ActivityItem(
                    kind="task",
                    message=f'Task "{task.title}" was {task.status.value.lower()}',
                    timestamp=_at_midnight(task.assigned_date),
                )
            )
        for log in logs:
            who = names.get(log.employee_id, "Employee")
            activity.append(
                ActivityItem(
                    kind="log",
                    message=f"{who} {'started' if log.is_open else 'completed'} work",
                    timestamp=log.end_time or log.start_time,
                )
            )
        for advance in self._advances.list_all():
            who = names.get(advance.employee_id, "Employee")
            activity.append(
                ActivityItem(
                    kind="advance",
                    message=f"Advance of {advance.amount} given to {who}",
                    timestamp=_at_midnight(advance.advance_date),
                )
            )
        activity.sort(key=lambda a: a.timestamp, reverse=True)

        upcoming = sorted((t for t in tasks if t.status != TaskStatus.COMPLETED), key=lambda t: t.due_date)

        return DashboardSummary(
            total_employees=sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE),
            active_today=sum(1 for log in todays_logs if log.is_open),
            total_hours_today=sum((log.hours_worked for log in todays_logs), Decimal("0")),
            tasks_completed=sum(1 for t in tasks if t.status == TaskStatus.COMPLETED),
            tasks_pending=sum(1 for t in tasks if t.status != TaskStatus.COMPLETED),
            recent_activity=activity[:RECENT_ACTIVITY_LIMIT],
            upcoming_tasks=upcoming[:UPCOMING_TASKS_LIMIT],
        )
