from datetime import date, datetime

import pytest

from src.printpress.printpress.attendance.model import AttendancePatch
from src.printpress.printpress.core.enums import AttendanceStatus
from src.printpress.printpress.core.exceptions import NotFoundError, ValidationError


def test_record_and_list_newest_first(container, add_employee):
    employee_id = add_employee()
    service = container.attendance_service
    first = service.record(
        employee_id=employee_id,
        work_date=date(2024, 3, 1),
        check_in=datetime(2024, 3, 1, 8, 0),
        check_out=datetime(2024, 3, 1, 17, 0),
    )
    second = service.record(
        employee_id=employee_id,
        work_date=date(2024, 3, 2),
        check_in=datetime(2024, 3, 2, 9, 15),
        status=AttendanceStatus.LATE,
    )

    assert [r.attendance_id for r in service.list(employee_id=employee_id)] == [second, first]
    assert [r.attendance_id for r in service.list(work_date=date(2024, 3, 1))] == [first]


def test_check_out_cannot_precede_check_in(container, add_employee):
    employee_id = add_employee()
    service = container.attendance_service

    with pytest.raises(ValidationError):
        service.record(
            employee_id=employee_id,
            work_date=date(2024, 3, 1),
            check_in=datetime(2024, 3, 1, 8, 0),
            check_out=datetime(2024, 3, 1, 7, 0),
        )

    attendance_id = service.record(
        employee_id=employee_id, work_date=date(2024, 3, 1), check_in=datetime(2024, 3, 1, 8, 0)
    )
    with pytest.raises(ValidationError):
        service.update(attendance_id, AttendancePatch(check_out=datetime(2024, 3, 1, 6, 0)))


def test_update_and_delete(container, add_employee):
    employee_id = add_employee()
    service = container.attendance_service
    attendance_id = service.record(
        employee_id=employee_id, work_date=date(2024, 3, 1), check_in=datetime(2024, 3, 1, 8, 0)
    )

    updated = service.update(attendance_id, AttendancePatch.from_payload({"status": "Half-day", "notes": "Doctor"}))
    assert updated.status == AttendanceStatus.HALF_DAY
    assert updated.notes == "Doctor"

    service.delete(attendance_id)
    with pytest.raises(NotFoundError):
        service.update(attendance_id, AttendancePatch(notes="x"))
