from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import AttendanceStatus
from ..storage.local_base import LocalRepositoryBase
from .model import AttendancePatch, AttendanceRecord
from .repository import AttendanceRepository


class LocalAttendanceRepository(LocalRepositoryBase[AttendanceRecord], AttendanceRepository):
    collection = "attendance"
    key = "attendance_id"

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        return self._find(attendance_id)

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        items = self._filter(
            lambda r: employee_id is None or r.employee_id == employee_id,
            lambda r: work_date is None or r.work_date == work_date,
        )
        return sorted(items, key=lambda r: (r.work_date, r.check_in), reverse=True)

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
        return self._insert(
            AttendanceRecord(
                attendance_id=new_id(),
                employee_id=employee_id,
                work_date=work_date,
                check_in=check_in,
                check_out=check_out,
                status=status,
                notes=notes,
            )
        )

    def update(self, attendance_id: str, patch: AttendancePatch) -> bool:
        return self._patch(attendance_id, patch)

    def delete(self, attendance_id: str) -> bool:
        return self._remove(attendance_id)
