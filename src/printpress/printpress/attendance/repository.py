from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendancePatch, AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime],
        status: AttendanceStatus,
        notes: str = "",
    ) -> str:
        raise NotImplementedError

    def update(self, attendance_id: str, patch: AttendancePatch) -> bool:
        raise NotImplementedError

    def delete(self, attendance_id: str) -> bool:
        raise NotImplementedError
