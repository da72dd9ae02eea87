from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok, query_arg
from ..common.validators import parse_enum
from ..container import Container
from ..core.enums import EmployeeStatus
from .model import EmployeePatch, NewEmployee


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        status = query_arg("status")
        status = parse_enum(EmployeeStatus, status, "Status") if status else None
        return ok(service.list(status=status))

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        employee_id = service.create(NewEmployee.from_payload(json_body()))
        return ok(service.get(employee_id), 201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: str):
        return ok(service.get(employee_id))

    @app.route("/api/employees/<employee_id>", methods=["PATCH", "PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        return ok(service.update(employee_id, EmployeePatch.from_payload(json_body())))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_deactivate")
    def employees_deactivate(employee_id: str):
        # Soft delete only.
        service.deactivate(employee_id)
        return ok(service.get(employee_id))

    @app.route("/api/employees/<employee_id>/reactivate", methods=["POST"], endpoint="employees_reactivate")
    def employees_reactivate(employee_id: str):
        service.reactivate(employee_id)
        return ok(service.get(employee_id))
