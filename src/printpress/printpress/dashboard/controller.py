from __future__ import annotations

from flask import Flask

from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return ok(container.dashboard_service.summary())
