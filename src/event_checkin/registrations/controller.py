from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..common.http import request_data
from ..container import Container
from ..core.exceptions import DuplicateError, PersistenceError, ValidationError
from ..tokens.codec import build_token_payload
from ..tokens.qr import render_qr_data_url, render_qr_png


def register(app: Flask, container: Container) -> None:
    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_attendee():
        data = request_data()
        try:
            registration = container.registration_service.register(
                data.get("name"), data.get("email"), data.get("roll")
            )
        except ValidationError as e:
            return _fail(str(e), 400)
        except DuplicateError as e:
            return _fail(str(e), 409)
        except PersistenceError:
            return _fail("Server error during registration.", 500)

        token = build_token_payload(registration)
        return jsonify({
            "success": True,
            "message": "Registration successful!",
            "id": registration.registration_id,
            "token": token,
            "qrCode": render_qr_data_url(token),
            "userData": {
                "name": registration.name,
                "email": registration.email,
                "roll": registration.roll,
            },
        }), 201

    @app.route("/records", methods=["GET"], endpoint="records")
    @app.route("/admin/data", methods=["GET"], endpoint="admin_data")
    def records():
        try:
            rows = container.registration_service.list()
        except PersistenceError:
            return _fail("Database error.", 500)
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/stats", methods=["GET"], endpoint="stats")
    @app.route("/attendance-status", methods=["GET"], endpoint="attendance_status")
    def stats():
        try:
            counts = container.registration_service.counts()
        except PersistenceError:
            return _fail("Database error.", 500)
        return jsonify({
            "success": True,
            "totalRegistrations": counts.total_registered,
            "totalAttendees": counts.total_attended,
        })

    @app.route("/user-details-by-id/<user_id>", methods=["GET"], endpoint="user_details")
    def user_details(user_id: str):
        try:
            registration = container.registration_service.find_by_id(user_id)
        except ValidationError:
            return _fail("User not found.", 404)
        except PersistenceError:
            return _fail("Database error.", 500)
        if registration is None:
            return _fail("User not found.", 404)
        return jsonify({"success": True, "user": registration.to_dict()})

    @app.route("/registrations/<int:registration_id>/qr.png", methods=["GET"], endpoint="registration_qr")
    def registration_qr(registration_id: int):
        try:
            registration = container.registration_service.find_by_id(registration_id)
        except ValidationError:
            return _fail("User not found.", 404)
        except PersistenceError:
            return _fail("Database error.", 500)
        if registration is None:
            return _fail("User not found.", 404)

        png = render_qr_png(build_token_payload(registration))
        return send_file(io.BytesIO(png), mimetype="image/png")
