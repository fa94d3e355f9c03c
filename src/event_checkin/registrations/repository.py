from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Registration, RegistrationCounts


class RegistrationRepository(Protocol):
    def list_all(self) -> Sequence[Registration]:
        raise NotImplementedError

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        raise NotImplementedError

    def create(self, *, name: str, email: str, roll: str) -> Registration:
        """Insert a new registration with the next identifier.

        Raises DuplicateError when email or roll is already taken.
        """
        raise NotImplementedError

    def mark_attended(self, registration_id: int) -> bool:
        """Flip attended false -> true in one conditional write.

        Returns True when this call performed the flip, False when no
        unattended record with that id existed.
        """
        raise NotImplementedError

    def counts(self) -> RegistrationCounts:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError
