from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScannedToken:
    """Normalized payload of a scanned attendance token."""

    registration_id: int
