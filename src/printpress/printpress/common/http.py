"""JSON response helpers shared by the feature controllers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, NotFoundError
from .serializers import to_json_value

logger = logging.getLogger(__name__)


def json_body() -> Mapping[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def ok(data: Any = None, status: int = 200, **extra: Any):
    payload = {"success": True, "data": to_json_value(data)}
    payload.update(extra)
    return jsonify(payload), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def query_arg(name: str):
    value = request.args.get(name, "").strip()
    return value or None


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = 404 if isinstance(e, NotFoundError) else 400
        return fail(str(e), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.path, exc_info=True)
        return fail("Internal server error", 500)
