from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok, query_arg
from ..common.validators import optional_text, parse_date, parse_datetime, parse_optional_datetime
from ..container import Container
from .model import WorkLogPatch


def register(app: Flask, container: Container) -> None:
    service = container.worklog_service

    @app.route("/api/worklogs", methods=["GET"], endpoint="worklogs_list")
    def worklogs_list():
        work_date = query_arg("date")
        return ok(
            service.list(
                employee_id=query_arg("employee_id"),
                work_date=parse_date(work_date, "Date") if work_date else None,
            )
        )

    @app.route("/api/worklogs", methods=["POST"], endpoint="worklogs_create")
    def worklogs_create():
        data = json_body()
        log_id = service.record(
            employee_id=optional_text(data.get("employee_id")) or "",
            start_time=parse_datetime(data.get("start_time"), "Start time"),
            end_time=parse_optional_datetime(data.get("end_time"), "End time"),
            description=data.get("description", ""),
            task_id=optional_text(data.get("task_id")),
        )
        return ok(service.get(log_id), 201)

    @app.route("/api/worklogs/start", methods=["POST"], endpoint="worklogs_start")
    def worklogs_start():
        data = json_body()
        log_id = service.start_work(
            optional_text(data.get("employee_id")) or "",
            description=data.get("description", ""),
            task_id=optional_text(data.get("task_id")),
        )
        return ok(service.get(log_id), 201)

    @app.route("/api/worklogs/<log_id>/finish", methods=["POST"], endpoint="worklogs_finish")
    def worklogs_finish(log_id: str):
        return ok(service.finish_work(log_id))

    @app.route("/api/worklogs/<log_id>", methods=["GET"], endpoint="worklogs_get")
    def worklogs_get(log_id: str):
        return ok(service.get(log_id))

    @app.route("/api/worklogs/<log_id>", methods=["PATCH", "PUT"], endpoint="worklogs_update")
    def worklogs_update(log_id: str):
        return ok(service.update(log_id, WorkLogPatch.from_payload(json_body())))

    @app.route("/api/worklogs/<log_id>", methods=["DELETE"], endpoint="worklogs_delete")
    def worklogs_delete(log_id: str):
        service.delete(log_id)
        return ok(message="Work log deleted")
