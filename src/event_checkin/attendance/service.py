from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_positive_int
from ..core.constants import MAX_REGISTRATION_ID
from ..core.exceptions import AlreadyMarkedError, NotFoundError
from ..registrations.model import Registration
from ..registrations.repository import RegistrationRepository
from ..tokens.codec import parse_scanned_token
from ..tokens.model import ScannedToken

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record that a registered attendee showed up.

    The transition registered -> attended happens at most once per record.
    The repository performs it as a single conditional write; this service
    only interprets a "no row changed" outcome.
    """

    def __init__(self, registrations: RegistrationRepository):
        self._registrations = registrations

    def mark_attendance(self, registration_id) -> Registration:
        registration_id = require_positive_int(registration_id, "id")
        if registration_id > MAX_REGISTRATION_ID:
            logger.info("attendance rejected: id=%s out of range", registration_id)
            raise NotFoundError("Invalid QR code.")

        if not self._registrations.mark_attended(registration_id):
            existing = self._registrations.get_by_id(registration_id)
            if existing is None:
                logger.info("attendance rejected: unknown id=%s", registration_id)
                raise NotFoundError("Invalid QR code.")
            logger.info("attendance rejected: id=%s already marked", registration_id)
            raise AlreadyMarkedError("Attendance already marked for this QR.")

        logger.info("attendance marked id=%s", registration_id)
        return self._registrations.get_by_id(registration_id)

    def mark_token(self, token: ScannedToken) -> Registration:
        return self.mark_attendance(token.registration_id)

    def mark_from_scan(self, payload: Any) -> Registration:
        return self.mark_token(parse_scanned_token(payload))
