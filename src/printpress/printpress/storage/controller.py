from __future__ import annotations

import logging

from flask import Flask, request

from ..common.http import fail, ok
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    """Backup routes; only meaningful for the local JSON store."""

    def _store_or_fail():
        if container.local_store is None:
            return None, fail("Data export/import is only available with local storage", 400)
        return container.local_store, None

    @app.route("/api/data/export", methods=["GET"], endpoint="data_export")
    def data_export():
        store, error = _store_or_fail()
        if error:
            return error
        return app.response_class(
            store.export_json(),
            mimetype="application/json",
            headers={"Content-Disposition": "attachment; filename=printpress-data.json"},
        )

    @app.route("/api/data/import", methods=["POST"], endpoint="data_import")
    def data_import():
        store, error = _store_or_fail()
        if error:
            return error
        store.import_json(request.get_data(as_text=True))
        return ok(message="Data imported")

    @app.route("/api/data/reset", methods=["POST"], endpoint="data_reset")
    def data_reset():
        store, error = _store_or_fail()
        if error:
            return error
        store.reset()
        logger.warning("All local data was reset through the API")
        return ok(message="Data reset")
