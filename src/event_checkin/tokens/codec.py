from __future__ import annotations

import json
from typing import Any, Mapping

from ..common.validators import require_positive_int
from ..core.exceptions import ValidationError
from ..registrations.model import Registration
from .model import ScannedToken


def build_token_payload(registration: Registration) -> str:
    """Text encoded into the QR image handed to the attendee."""

    return json.dumps(
        {
            "id": registration.registration_id,
            "name": registration.name,
            "email": registration.email,
            "roll": registration.roll,
        }
    )


def parse_scanned_token(raw: Any) -> ScannedToken:
    """Normalize whatever the scanner produced into a ScannedToken.

    Accepted shapes: an integer id, a string holding digits, JSON text of
    either an id or an object with an ``id`` key, or such an object already
    decoded.
    """

    if raw is None:
        raise ValidationError("QR data required")

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise ValidationError("QR data required")
        if text.isdigit():
            return ScannedToken(registration_id=require_positive_int(text, "id"))
        try:
            raw = json.loads(text)
        except ValueError as exc:
            raise ValidationError("Invalid QR code.") from exc

    if isinstance(raw, Mapping):
        if "id" not in raw:
            raise ValidationError("Invalid QR code.")
        raw = raw["id"]

    if isinstance(raw, (Mapping, list)):
        raise ValidationError("Invalid QR code.")

    return ScannedToken(registration_id=require_positive_int(raw, "id"))
