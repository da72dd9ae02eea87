from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, parse_datetime, parse_decimal, parse_enum
from ..core.enums import LogStatus


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: one worked shift.

    ``hours_worked`` stays 0 while the shift is open (``end_time`` is None).
    """

    log_id: str
    employee_id: str
    work_date: date
    start_time: datetime
    end_time: Optional[datetime]
    description: str
    task_id: Optional[str]
    status: LogStatus
    hours_worked: Decimal = Decimal("0")

    @property
    def is_open(self) -> bool:
        return self.end_time is None


@dataclass(frozen=True)
class WorkLogPatch(Patch):
    description: Optional[str] = UNSET
    task_id: Optional[str] = UNSET
    start_time: Optional[datetime] = UNSET
    end_time: Optional[datetime] = UNSET
    status: Optional[LogStatus] = UNSET
    hours_worked: Optional[Decimal] = UNSET

    converters = {
        "description": lambda v: optional_text(v) or "",
        "task_id": optional_text,
        "start_time": lambda v: parse_datetime(v, "Start time"),
        "end_time": lambda v: None if v in (None, "") else parse_datetime(v, "End time"),
        "status": lambda v: parse_enum(LogStatus, v, "Status"),
        "hours_worked": lambda v: parse_decimal(v, "Hours worked"),
    }
