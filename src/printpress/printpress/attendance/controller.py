from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok, query_arg
from ..common.validators import optional_text, parse_date, parse_datetime, parse_enum, parse_optional_datetime
from ..container import Container
from ..core.enums import AttendanceStatus
from .model import AttendancePatch


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        work_date = query_arg("date")
        return ok(
            service.list(
                employee_id=query_arg("employee_id"),
                work_date=parse_date(work_date, "Date") if work_date else None,
            )
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        data = json_body()
        check_in = parse_datetime(data.get("check_in"), "Check-in")
        work_date = data.get("work_date")
        attendance_id = service.record(
            employee_id=optional_text(data.get("employee_id")) or "",
            work_date=parse_date(work_date, "Date") if work_date else check_in.date(),
            check_in=check_in,
            check_out=parse_optional_datetime(data.get("check_out"), "Check-out"),
            status=parse_enum(AttendanceStatus, data.get("status", AttendanceStatus.PRESENT.value), "Status"),
            notes=data.get("notes", ""),
        )
        return ok({"attendance_id": attendance_id}, 201)

    @app.route("/api/attendance/<attendance_id>", methods=["PATCH", "PUT"], endpoint="attendance_update")
    def attendance_update(attendance_id: str):
        return ok(service.update(attendance_id, AttendancePatch.from_payload(json_body())))

    @app.route("/api/attendance/<attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(attendance_id: str):
        service.delete(attendance_id)
        return ok(message="Attendance record deleted")
