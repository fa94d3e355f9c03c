from __future__ import annotations

import atexit
import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_DATA_FILE, DEFAULT_DATABASE_URL, DEFAULT_EXPORT_FILENAME
from .core.exceptions import PersistenceError
from .export.controller import register as register_export
from .registrations.controller import register as register_registrations

_SETTING_KEYS = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "STORAGE_BACKEND",
    "DATABASE_URL",
    "DATA_FILE",
    "EXPORT_FILENAME",
    "AUTO_INIT_DB",
    "LOG_LEVEL",
)


# Containers of apps still running; closed once at interpreter exit.
_open_containers: list = []


@atexit.register
def _close_open_containers() -> None:
    while _open_containers:
        _open_containers.pop().close()


def close_app(app: Flask) -> None:
    """Release the app's storage and drop it from the exit hook."""

    container = app.extensions.pop("event_checkin", None)
    if container is None:
        return
    _open_containers[:] = [c for c in _open_containers if c is not container]
    container.close()


def _load_settings(overrides: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {key: getattr(settings, key) for key in _SETTING_KEYS if hasattr(settings, key)}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})

    values.setdefault("STORAGE_BACKEND", "sql")
    values.setdefault("DATABASE_URL", DEFAULT_DATABASE_URL)
    values.setdefault("DATA_FILE", DEFAULT_DATA_FILE)
    values.setdefault("EXPORT_FILENAME", DEFAULT_EXPORT_FILENAME)
    values.setdefault("LOG_LEVEL", "INFO")
    return values


def create_app(settings_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = _load_settings(settings_overrides)
    app.config.update(settings)
    app.secret_key = settings.get("SECRET_KEY")

    logging.basicConfig(
        level=str(settings["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(str(settings["LOG_LEVEL"]).upper())
    app.logger.info(
        "[event-checkin] settings=%s storage=%s",
        settings["SETTINGS_MODULE"],
        settings["STORAGE_BACKEND"],
    )

    container = build_container(
        storage_backend=settings["STORAGE_BACKEND"],
        database_url=settings["DATABASE_URL"],
        data_file=settings["DATA_FILE"],
        auto_init_db=bool(settings.get("AUTO_INIT_DB", False)),
    )
    app.extensions["event_checkin"] = container
    _open_containers.append(container)

    register_registrations(app, container)
    register_attendance(app, container)
    register_export(app, container)

    @app.errorhandler(PersistenceError)
    def _persistence_error(_e):
        return jsonify({"success": False, "message": "Server error."}), 500

    return app
