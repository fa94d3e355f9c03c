from __future__ import annotations

import pytest

from event_checkin.database.bootstrap import apply_schema
from event_checkin.database.connection import DBConfig, DatabaseConnection
from event_checkin.main import close_app, create_app
from event_checkin.registrations.json_registration_repository import JsonRegistrationRepository
from event_checkin.registrations.sql_registration_repository import SqlRegistrationRepository


@pytest.fixture
def sql_repo(tmp_path):
    conn = DatabaseConnection(DBConfig(url=f"sqlite:///{tmp_path / 'checkin.db'}"))
    apply_schema(conn)
    repo = SqlRegistrationRepository(conn)
    yield repo
    repo.close()


@pytest.fixture
def json_repo(tmp_path):
    return JsonRegistrationRepository(tmp_path / "registrations.json")


@pytest.fixture(params=["sql", "json"])
def repo(request, sql_repo, json_repo):
    return sql_repo if request.param == "sql" else json_repo


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "STORAGE_BACKEND": "sql",
            "DATABASE_URL": f"sqlite:///{tmp_path / 'app.db'}",
            "AUTO_INIT_DB": True,
        }
    )
    yield app
    close_app(app)


@pytest.fixture
def client(app):
    return app.test_client()
