import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///event_checkin_test.db")
DATA_FILE = os.getenv("DATA_FILE", "registrations_test.json")

EXPORT_FILENAME = "attendance.xlsx"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
