from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import case, false, func, insert, or_, select, true, update
from sqlalchemy.exc import IntegrityError

from ..core.exceptions import DuplicateError
from ..database.connection import DatabaseConnection
from ..database.schema import registrations
from ..database.sql_base import db_transaction
from .model import Registration, RegistrationCounts
from .repository import RegistrationRepository

_COLUMNS = (
    registrations.c.id,
    registrations.c.name,
    registrations.c.email,
    registrations.c.roll,
    registrations.c.attended,
)


def _to_registration(r: Mapping[str, Any]) -> Registration:
    return Registration(
        registration_id=int(r["id"]),
        name=r["name"],
        email=r["email"],
        roll=r["roll"],
        attended=bool(r["attended"]),
    )


class SqlRegistrationRepository(RegistrationRepository):
    """Registrations table accessed through SQLAlchemy Core.

    Writes go through one lock per instance so that id assignment
    (max + 1) and the duplicate check see a stable table. The UNIQUE
    constraints on email/roll back this up at the database level.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._write_lock = threading.Lock()

    def list_all(self) -> Sequence[Registration]:
        with db_transaction(self._conn_factory) as conn:
            rows = conn.execute(select(*_COLUMNS).order_by(registrations.c.id)).mappings().all()
            return [_to_registration(r) for r in rows]

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        with db_transaction(self._conn_factory) as conn:
            r = conn.execute(
                select(*_COLUMNS).where(registrations.c.id == int(registration_id))
            ).mappings().first()
            return _to_registration(r) if r else None

    def create(self, *, name: str, email: str, roll: str) -> Registration:
        with self._write_lock:
            try:
                with db_transaction(self._conn_factory) as conn:
                    taken = conn.execute(
                        select(registrations.c.id)
                        .where(or_(registrations.c.email == email, registrations.c.roll == roll))
                        .limit(1)
                    ).first()
                    if taken:
                        raise DuplicateError("This email or roll number is already registered.")

                    next_id = conn.execute(
                        select(func.coalesce(func.max(registrations.c.id), 0) + 1)
                    ).scalar_one()
                    conn.execute(
                        insert(registrations).values(
                            id=int(next_id),
                            name=name,
                            email=email,
                            roll=roll,
                            attended=False,
                        )
                    )
            except IntegrityError as exc:
                # Another writer outside this process got there first.
                raise DuplicateError("This email or roll number is already registered.") from exc

        return Registration(registration_id=int(next_id), name=name, email=email, roll=roll, attended=False)

    def mark_attended(self, registration_id: int) -> bool:
        with self._write_lock:
            with db_transaction(self._conn_factory) as conn:
                result = conn.execute(
                    update(registrations)
                    .where(registrations.c.id == int(registration_id))
                    .where(registrations.c.attended == false())
                    .values(attended=True)
                )
                return result.rowcount == 1

    def counts(self) -> RegistrationCounts:
        with db_transaction(self._conn_factory) as conn:
            total, attended = conn.execute(
                select(
                    func.count(registrations.c.id),
                    func.coalesce(func.sum(case((registrations.c.attended == true(), 1), else_=0)), 0),
                )
            ).one()
            return RegistrationCounts(total_registered=int(total), total_attended=int(attended))

    def close(self) -> None:
        self._conn_factory.close()
