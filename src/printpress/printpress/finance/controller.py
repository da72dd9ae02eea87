from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import month_index, now_local
from ..common.http import json_body, ok, query_arg
from ..common.validators import optional_text, parse_bool, parse_date, parse_decimal, require_month_index, require_year
from ..container import Container
from .model import AdvancePatch, DeductionPatch


def register(app: Flask, container: Container) -> None:
    service = container.finance_service

    @app.route("/api/advances", methods=["GET"], endpoint="advances_list")
    def advances_list():
        is_paid = query_arg("is_paid")
        return ok(
            service.list_advances(
                employee_id=query_arg("employee_id"),
                is_paid=parse_bool(is_paid, "Paid") if is_paid else None,
            )
        )

    @app.route("/api/advances", methods=["POST"], endpoint="advances_create")
    def advances_create():
        data = json_body()
        advance_id = service.record_advance(
            employee_id=optional_text(data.get("employee_id")) or "",
            amount=parse_decimal(data.get("amount"), "Amount"),
            advance_date=parse_date(data.get("date"), "Date"),
            description=data.get("description", ""),
        )
        return ok(service.get_advance(advance_id), 201)

    @app.route("/api/advances/<advance_id>", methods=["PATCH", "PUT"], endpoint="advances_update")
    def advances_update(advance_id: str):
        return ok(service.update_advance(advance_id, AdvancePatch.from_payload(json_body())))

    @app.route("/api/advances/<advance_id>", methods=["DELETE"], endpoint="advances_delete")
    def advances_delete(advance_id: str):
        service.delete_advance(advance_id)
        return ok(message="Advance deleted")

    @app.route("/api/deductions", methods=["GET"], endpoint="deductions_list")
    def deductions_list():
        return ok(service.list_deductions(employee_id=query_arg("employee_id")))

    @app.route("/api/deductions", methods=["POST"], endpoint="deductions_create")
    def deductions_create():
        data = json_body()
        deduction_id = service.record_deduction(
            employee_id=optional_text(data.get("employee_id")) or "",
            amount=parse_decimal(data.get("amount"), "Amount"),
            deduction_date=parse_date(data.get("date"), "Date"),
            reason=data.get("reason", ""),
            advance_id=optional_text(data.get("advance_id")),
        )
        return ok(service.get_deduction(deduction_id), 201)

    @app.route("/api/deductions/<deduction_id>", methods=["PATCH", "PUT"], endpoint="deductions_update")
    def deductions_update(deduction_id: str):
        return ok(service.update_deduction(deduction_id, DeductionPatch.from_payload(json_body())))

    @app.route("/api/deductions/<deduction_id>", methods=["DELETE"], endpoint="deductions_delete")
    def deductions_delete(deduction_id: str):
        service.delete_deduction(deduction_id)
        return ok(message="Deduction deleted")

    @app.route("/api/finance/summary", methods=["GET"], endpoint="finance_summary")
    def finance_summary():
        today = now_local().date()
        month = query_arg("month")
        year = query_arg("year")
        return ok(
            service.monthly_summary(
                month=require_month_index(month) if month is not None else month_index(today),
                year=require_year(year) if year is not None else today.year,
                employee_id=query_arg("employee_id"),
            )
        )
