from __future__ import annotations

from enum import Enum


class AttendanceState(str, Enum):
    """Attendance lifecycle of a single registration."""

    REGISTERED = "REGISTERED"
    ATTENDED = "ATTENDED"


class StorageBackend(str, Enum):
    SQL = "sql"
    JSON = "json"
