from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.validators import optional_text
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from .model import AttendancePatch, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeService):
        self._attendance = attendance
        self._employees = employees

    @staticmethod
    def _check_times(check_in: datetime, check_out: Optional[datetime]) -> None:
        if check_out is not None and check_out < check_in:
            raise ValidationError("Check-out cannot be before check-in")

    def list(
        self,
        *,
        employee_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all(employee_id=employee_id, work_date=work_date)

    def record(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime] = None,
        status: AttendanceStatus = AttendanceStatus.PRESENT,
        notes: str = "",
    ) -> str:
        self._employees.require_active(employee_id)
        self._check_times(check_in, check_out)

        attendance_id = self._attendance.create(
            employee_id=employee_id,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            status=status,
            notes=optional_text(notes) or "",
        )
        logger.info("Attendance %s recorded for employee %s on %s", attendance_id, employee_id, work_date)
        return attendance_id

    def update(self, attendance_id: str, patch: AttendancePatch) -> AttendanceRecord:
        current = self._attendance.get_by_id(attendance_id)
        if not current:
            raise NotFoundError("Attendance record not found")

        updated = patch.apply(current)
        self._check_times(updated.check_in, updated.check_out)

        self._attendance.update(attendance_id, patch)
        return self._attendance.get_by_id(attendance_id)

    def delete(self, attendance_id: str) -> None:
        if not self._attendance.delete(attendance_id):
            raise NotFoundError("Attendance record not found")
