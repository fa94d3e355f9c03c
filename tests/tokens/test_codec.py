from __future__ import annotations

import base64
import json

import pytest

from event_checkin.core.exceptions import ValidationError
from event_checkin.registrations.model import Registration
from event_checkin.tokens.codec import build_token_payload, parse_scanned_token
from event_checkin.tokens.model import ScannedToken
from event_checkin.tokens.qr import render_qr_data_url, render_qr_png

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_payload_carries_id_and_identity_fields():
    payload = build_token_payload(Registration(7, "Alice", "a@x.com", "R1", attended=True))

    assert json.loads(payload) == {"id": 7, "name": "Alice", "email": "a@x.com", "roll": "R1"}


@pytest.mark.parametrize(
    "raw",
    [
        7,
        "7",
        " 7 ",
        '{"id": 7, "name": "Alice", "email": "a@x.com", "roll": "R1"}',
        '{"id": "7"}',
        {"id": 7},
        json.dumps(7),
    ],
)
def test_parse_accepts_supported_shapes(raw):
    assert parse_scanned_token(raw) == ScannedToken(registration_id=7)


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "not-json",
        '{"name": "Alice"}',
        '{"id": null}',
        '{"id": {"id": 1}}',
        '{"id": Infinity}',
        '{"id": 1e400}',
        "[1, 2]",
        "0",
        "-3",
        True,
        {"id": "abc"},
    ],
)
def test_parse_rejects_malformed_payloads(raw):
    with pytest.raises(ValidationError):
        parse_scanned_token(raw)


def test_qr_png_and_data_url():
    payload = build_token_payload(Registration(1, "Alice", "a@x.com", "R1"))

    png = render_qr_png(payload)
    assert png.startswith(PNG_MAGIC)

    url = render_qr_data_url(payload)
    prefix = "data:image/png;base64,"
    assert url.startswith(prefix)
    assert base64.b64decode(url[len(prefix):]).startswith(PNG_MAGIC)
