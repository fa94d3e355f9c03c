from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .core.enums import StorageBackend
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .registrations.json_registration_repository import JsonRegistrationRepository
from .registrations.repository import RegistrationRepository
from .registrations.service import RegistrationService
from .registrations.sql_registration_repository import SqlRegistrationRepository


@dataclass(frozen=True)
class Container:
    registrations_repo: RegistrationRepository

    registration_service: RegistrationService
    attendance_service: AttendanceService

    def close(self) -> None:
        self.registrations_repo.close()


def build_container(
    *,
    storage_backend: str = StorageBackend.SQL.value,
    database_url: Optional[str] = None,
    data_file: Optional[str] = None,
    auto_init_db: bool = False,
) -> Container:
    try:
        backend = StorageBackend(str(storage_backend).lower())
    except ValueError as exc:
        raise ValidationError(f"Unknown storage backend: {storage_backend!r}") from exc

    registrations_repo: RegistrationRepository
    if backend is StorageBackend.JSON:
        if not data_file:
            raise ValidationError("DATA_FILE is required for the json storage backend")
        registrations_repo = JsonRegistrationRepository(data_file)
    else:
        if not database_url:
            raise ValidationError("DATABASE_URL is required for the sql storage backend")
        conn = DatabaseConnection(DBConfig(url=database_url))
        if auto_init_db:
            apply_schema(conn)
        registrations_repo = SqlRegistrationRepository(conn)

    return Container(
        registrations_repo=registrations_repo,
        registration_service=RegistrationService(registrations_repo),
        attendance_service=AttendanceService(registrations_repo),
    )
