from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, parse_date, parse_enum, require_non_empty
from ..core.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    task_id: str
    employee_id: str
    title: str
    description: str
    due_date: date
    assigned_date: date
    priority: TaskPriority
    status: TaskStatus


@dataclass(frozen=True)
class TaskPatch(Patch):
    employee_id: Optional[str] = UNSET
    title: Optional[str] = UNSET
    description: Optional[str] = UNSET
    due_date: Optional[date] = UNSET
    priority: Optional[TaskPriority] = UNSET
    status: Optional[TaskStatus] = UNSET

    converters = {
        "employee_id": lambda v: require_non_empty(v, "Employee"),
        "title": lambda v: require_non_empty(v, "Title"),
        "description": lambda v: optional_text(v) or "",
        "due_date": lambda v: parse_date(v, "Due date"),
        "priority": lambda v: parse_enum(TaskPriority, v, "Priority"),
        "status": lambda v: parse_enum(TaskStatus, v, "Status"),
    }
