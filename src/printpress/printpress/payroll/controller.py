from __future__ import annotations

import csv
import io

from flask import Flask

from ..common.datetime_utils import month_index, now_local
from ..common.http import ok, query_arg
from ..common.serializers import to_json_dict
from ..common.validators import require_month_index, require_year
from ..container import Container
from ..core.constants import MONEY_QUANTUM, MONTH_NAMES


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _period() -> tuple[int, int]:
        today = now_local().date()
        month = query_arg("month")
        year = query_arg("year")
        return (
            require_month_index(month) if month is not None else month_index(today),
            require_year(year) if year is not None else today.year,
        )

    @app.route("/api/payroll/<employee_id>/balance", methods=["GET"], endpoint="payroll_balance")
    def payroll_balance(employee_id: str):
        month, year = _period()
        breakdown = service.breakdown(employee_id, month, year)
        data = to_json_dict(breakdown)
        data["net"] = str(breakdown.net)
        return ok(data)

    @app.route("/api/payroll/report", methods=["GET"], endpoint="payroll_report")
    def payroll_report():
        month, year = _period()
        return ok(service.build_salary_report(month, year), month=month, year=year)

    @app.route("/api/payroll/report.csv", methods=["GET"], endpoint="payroll_report_csv")
    def payroll_report_csv():
        month, year = _period()
        rows = service.build_salary_report(month, year)

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["employee_id", "name", "position", "salary_type", "base_rate", "net_salary"],
        )
        writer.writeheader()
        for r in rows:
            writer.writerow(
                {
                    "employee_id": r.employee_id,
                    "name": r.name,
                    "position": r.position,
                    "salary_type": r.salary_type.value,
                    "base_rate": str(r.base_rate.quantize(MONEY_QUANTUM)),
                    "net_salary": str(r.net_salary.quantize(MONEY_QUANTUM)),
                }
            )

        filename = f"salary_report_{MONTH_NAMES[month].lower()}_{year}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
