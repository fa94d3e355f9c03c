import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "sql" (SQLAlchemy, SQLite by default) or "json" (flat registrations file)
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///event_checkin.db")
DATA_FILE = os.getenv("DATA_FILE", "registrations.json")

EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "attendance.xlsx")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app creates the registrations table on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
