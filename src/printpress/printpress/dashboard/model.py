from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ..tasks.model import Task


@dataclass(frozen=True)
class ActivityItem:
    kind: str  # task | log | advance
    message: str
    timestamp: datetime


@dataclass(frozen=True)
class DashboardSummary:
    total_employees: int
    active_today: int
    total_hours_today: Decimal
    tasks_completed: int
    tasks_pending: int
    recent_activity: list[ActivityItem]
    upcoming_tasks: list[Task]
