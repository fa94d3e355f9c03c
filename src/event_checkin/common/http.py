from __future__ import annotations

from typing import Any, Mapping

from flask import request


def request_data() -> Mapping[str, Any]:
    """JSON object body if present, otherwise submitted form fields."""

    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form
