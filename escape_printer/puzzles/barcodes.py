# escape_printer/puzzles/barcodes.py
"""Code 128 barcodes as PNG data URIs for the printed stage slips."""

from __future__ import annotations

import base64
import io
import logging
from typing import Optional

from barcode import Code128
from barcode.writer import ImageWriter

log = logging.getLogger(__name__)


def generate_barcode(text: str, module_height: float = 10.0, font_size: int = 10) -> Optional[str]:
    """
    Render `text` as a Code 128 PNG and return it as a data URI.
    Returns None for empty input or when the encoder fails; never raises.
    """
    if not text:
        return None
    try:
        buffered = io.BytesIO()
        Code128(str(text), writer=ImageWriter()).write(
            buffered,
            options={"module_height": float(module_height), "font_size": int(font_size), "write_text": True},
        )
        encoded = base64.b64encode(buffered.getvalue()).decode("utf-8")
        return f"data:image/png;base64,{encoded}"
    except Exception:
        log.exception("barcode: failed to encode %r", text)
        return None
