from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from ..core.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME
from ..registrations.model import Registration


def registrations_frame(registrations: Iterable[Registration]) -> pd.DataFrame:
    rows = [
        (r.registration_id, r.name, r.email, r.roll, "Yes" if r.attended else "No")
        for r in registrations
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def build_registrations_workbook(registrations: Iterable[Registration]) -> bytes:
    """Render registrations into an .xlsx workbook (single sheet)."""

    df = registrations_frame(registrations)
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
    return out.getvalue()
