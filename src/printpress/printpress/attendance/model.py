from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, parse_date, parse_datetime, parse_enum
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry for an employee and day."""

    attendance_id: str
    employee_id: str
    work_date: date
    check_in: datetime
    check_out: Optional[datetime]
    status: AttendanceStatus
    notes: str = ""


@dataclass(frozen=True)
class AttendancePatch(Patch):
    work_date: Optional[date] = UNSET
    check_in: Optional[datetime] = UNSET
    check_out: Optional[datetime] = UNSET
    status: Optional[AttendanceStatus] = UNSET
    notes: Optional[str] = UNSET

    converters = {
        "work_date": lambda v: parse_date(v, "Date"),
        "check_in": lambda v: parse_datetime(v, "Check-in"),
        "check_out": lambda v: None if v in (None, "") else parse_datetime(v, "Check-out"),
        "status": lambda v: parse_enum(AttendanceStatus, v, "Status"),
        "notes": lambda v: optional_text(v) or "",
    }
