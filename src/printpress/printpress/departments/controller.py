from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container
from .model import DepartmentPatch


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="departments_list")
    def departments_list():
        return ok(service.list())

    @app.route("/api/departments", methods=["POST"], endpoint="departments_create")
    def departments_create():
        data = json_body()
        department_id = service.create(name=data.get("name", ""), description=data.get("description", ""))
        return ok(service.get(department_id), 201)

    @app.route("/api/departments/<department_id>", methods=["PATCH", "PUT"], endpoint="departments_update")
    def departments_update(department_id: str):
        return ok(service.update(department_id, DepartmentPatch.from_payload(json_body())))

    @app.route("/api/departments/<department_id>", methods=["DELETE"], endpoint="departments_delete")
    def departments_delete(department_id: str):
        service.delete(department_id)
        return ok(message="Department deleted")
