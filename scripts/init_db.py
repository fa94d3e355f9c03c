from __future__ import annotations

import importlib

from sqlalchemy.engine import make_url

from event_checkin.config import get_settings_module
from event_checkin.database.bootstrap import apply_schema, list_tables
from event_checkin.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig(url=settings.DATABASE_URL))
    try:
        apply_schema(conn)
        tables = list_tables(conn)
    finally:
        conn.close()
    print(
        "OK: schema applied -> "
        f"{make_url(settings.DATABASE_URL).render_as_string(hide_password=True)} (tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
