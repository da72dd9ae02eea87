from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok, query_arg
from ..common.validators import optional_text, parse_date, parse_enum
from ..container import Container
from ..core.enums import TaskPriority, TaskStatus
from .model import TaskPatch


def register(app: Flask, container: Container) -> None:
    service = container.task_service

    @app.route("/api/tasks", methods=["GET"], endpoint="tasks_list")
    def tasks_list():
        status = query_arg("status")
        return ok(
            service.list(
                employee_id=query_arg("employee_id"),
                status=parse_enum(TaskStatus, status, "Status") if status else None,
            )
        )

    @app.route("/api/tasks/upcoming", methods=["GET"], endpoint="tasks_upcoming")
    def tasks_upcoming():
        return ok(service.upcoming())

    @app.route("/api/tasks", methods=["POST"], endpoint="tasks_create")
    def tasks_create():
        data = json_body()
        assigned = data.get("assigned_date")
        task_id = service.assign(
            employee_id=optional_text(data.get("employee_id")) or "",
            title=data.get("title", ""),
            description=data.get("description", ""),
            due_date=parse_date(data.get("due_date"), "Due date"),
            priority=parse_enum(TaskPriority, data.get("priority", TaskPriority.MEDIUM.value), "Priority"),
            status=parse_enum(TaskStatus, data.get("status", TaskStatus.PENDING.value), "Status"),
            assigned_date=parse_date(assigned, "Assigned date") if assigned else None,
        )
        return ok(service.get(task_id), 201)

    @app.route("/api/tasks/<task_id>", methods=["GET"], endpoint="tasks_get")
    def tasks_get(task_id: str):
        return ok(service.get(task_id))

    @app.route("/api/tasks/<task_id>", methods=["PATCH", "PUT"], endpoint="tasks_update")
    def tasks_update(task_id: str):
        return ok(service.update(task_id, TaskPatch.from_payload(json_body())))

    @app.route("/api/tasks/<task_id>/complete", methods=["POST"], endpoint="tasks_complete")
    def tasks_complete(task_id: str):
        return ok(service.mark_completed(task_id))

    @app.route("/api/tasks/<task_id>", methods=["DELETE"], endpoint="tasks_delete")
    def tasks_delete(task_id: str):
        service.delete(task_id)
        return ok(message="Task deleted")
