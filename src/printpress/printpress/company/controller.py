from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container
from .model import CompanyInfoPatch


def register(app: Flask, container: Container) -> None:
    service = container.company_service

    @app.route("/api/company", methods=["GET"], endpoint="company_get")
    def company_get():
        return ok(service.get())

    @app.route("/api/company", methods=["PATCH", "PUT"], endpoint="company_update")
    def company_update():
        return ok(service.update(CompanyInfoPatch.from_payload(json_body())))
