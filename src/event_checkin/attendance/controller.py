from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import request_data
from ..container import Container
from ..core.exceptions import AlreadyMarkedError, NotFoundError, PersistenceError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["POST"], endpoint="attendance")
    def mark_attendance():
        """Mark attendance from a scanned token.

        Body carries either ``qrData`` (the decoded QR text) or a bare ``id``.
        """
        data = request_data()
        raw = data.get("qrData") if "qrData" in data else data.get("id")

        try:
            registration = container.attendance_service.mark_from_scan(raw)
        except ValidationError as e:
            return jsonify({"success": False, "status": "invalid", "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "status": "not_found", "message": str(e)}), 404
        except AlreadyMarkedError as e:
            # Informational: token is valid, just used before.
            return jsonify({"success": False, "status": "already_marked", "message": str(e)}), 200
        except PersistenceError:
            return jsonify({"success": False, "status": "error", "message": "Database error."}), 500

        return jsonify({
            "success": True,
            "status": "marked",
            "message": "Attendance marked ✅",
            "user": registration.to_dict(),
        }), 200
