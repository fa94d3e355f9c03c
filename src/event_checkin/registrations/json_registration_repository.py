from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional, Sequence

from ..core.exceptions import DuplicateError, PersistenceError
from .model import Registration, RegistrationCounts
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)

# One lock per resolved file path, shared by every repository in the process.
_path_locks: dict[Path, threading.RLock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _path_locks_guard:
        return _path_locks.setdefault(path, threading.RLock())


def _to_registration(r: dict[str, Any]) -> Registration:
    return Registration(
        registration_id=int(r["id"]),
        name=str(r["name"]),
        email=str(r["email"]),
        roll=str(r["roll"]),
        attended=bool(r.get("attended", 0)),
    )


class JsonRegistrationRepository(RegistrationRepository):
    """Whole record set kept in one JSON file.

    File format: a list of ``{"id", "name", "email", "roll", "attended"}``
    objects with ``attended`` stored as 0/1. Every operation reads the
    file under the lock; every write replaces the file atomically.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = _lock_for(self._path.resolve())

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> list[dict[str, Any]]:
        try:
            if not self._path.exists():
                self._write([])
                return []
            data = json.loads(self._path.read_text(encoding="utf-8") or "[]")
        except (OSError, ValueError) as exc:
            logger.exception("could not read %s", self._path)
            raise PersistenceError("Storage is unavailable") from exc
        if not isinstance(data, list):
            raise PersistenceError(f"{self._path} does not hold a list of registrations")
        return data

    def _write(self, rows: list[dict[str, Any]]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=self._path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(rows, fh, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            logger.exception("could not write %s", self._path)
            raise PersistenceError("Storage is unavailable") from exc

    def list_all(self) -> Sequence[Registration]:
        with self._lock:
            rows = self._read()
        return sorted((_to_registration(r) for r in rows), key=lambda r: r.registration_id)

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        with self._lock:
            for r in self._read():
                if int(r["id"]) == int(registration_id):
                    return _to_registration(r)
        return None

    def create(self, *, name: str, email: str, roll: str) -> Registration:
        with self._lock:
            rows = self._read()
            if any(r["email"] == email or r["roll"] == roll for r in rows):
                raise DuplicateError("This email or roll number is already registered.")

            next_id = max((int(r["id"]) for r in rows), default=0) + 1
            rows.append({"id": next_id, "name": name, "email": email, "roll": roll, "attended": 0})
            self._write(rows)

        return Registration(registration_id=next_id, name=name, email=email, roll=roll, attended=False)

    def mark_attended(self, registration_id: int) -> bool:
        with self._lock:
            rows = self._read()
            for r in rows:
                if int(r["id"]) == int(registration_id) and not r.get("attended"):
                    r["attended"] = 1
                    self._write(rows)
                    return True
        return False

    def counts(self) -> RegistrationCounts:
        with self._lock:
            rows = self._read()
        return RegistrationCounts(
            total_registered=len(rows),
            total_attended=sum(1 for r in rows if r.get("attended")),
        )

    def close(self) -> None:
        # Nothing held open between operations.
        return None
