from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import MAX_REGISTRATION_ID
from ..core.exceptions import DuplicateError
from .model import Registration, RegistrationCounts
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: register attendees and read the record set."""

    def __init__(self, registrations: RegistrationRepository):
        self._registrations = registrations

    def register(self, name, email, roll) -> Registration:
        name = require_non_empty(name, "name")
        email = require_non_empty(email, "email")
        roll = require_non_empty(roll, "roll")

        try:
            registration = self._registrations.create(name=name, email=email, roll=roll)
        except DuplicateError:
            logger.info("rejected duplicate registration email=%s roll=%s", email, roll)
            raise

        logger.info("registered id=%s roll=%s", registration.registration_id, registration.roll)
        return registration

    def list(self) -> Sequence[Registration]:
        return list(self._registrations.list_all())

    def find_by_id(self, registration_id) -> Optional[Registration]:
        registration_id = require_positive_int(registration_id, "id")
        if registration_id > MAX_REGISTRATION_ID:
            return None
        return self._registrations.get_by_id(registration_id)

    def counts(self) -> RegistrationCounts:
        return self._registrations.counts()
