from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..container import Container
from ..core.constants import XLSX_MIMETYPE
from ..core.exceptions import PersistenceError
from .service import build_registrations_workbook


def register(app: Flask, container: Container) -> None:
    @app.route("/export", methods=["GET"], endpoint="export")
    def export_registrations():
        try:
            rows = container.registration_service.list()
        except PersistenceError:
            return jsonify({"success": False, "message": "Error downloading the file."}), 500

        out = io.BytesIO(build_registrations_workbook(rows))
        return send_file(
            out,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=app.config["EXPORT_FILENAME"],
        )
