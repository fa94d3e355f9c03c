from __future__ import annotations

import base64
import io

import qrcode


def render_qr_png(payload: str) -> bytes:
    img = qrcode.make(payload)
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()


def render_qr_data_url(payload: str) -> str:
    encoded = base64.b64encode(render_qr_png(payload)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
