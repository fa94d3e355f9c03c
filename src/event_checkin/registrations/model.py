from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceState


@dataclass(frozen=True)
class Registration:
    """Domain entity: one attendee's registration.

    Note: Plain data object (no storage access).
    """

    registration_id: int
    name: str
    email: str
    roll: str
    attended: bool = False

    @property
    def state(self) -> AttendanceState:
        return AttendanceState.ATTENDED if self.attended else AttendanceState.REGISTERED

    def to_dict(self) -> dict:
        return {
            "id": self.registration_id,
            "name": self.name,
            "email": self.email,
            "roll": self.roll,
            "attended": self.attended,
        }


@dataclass(frozen=True)
class RegistrationCounts:
    total_registered: int
    total_attended: int
