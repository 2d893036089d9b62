"""Scalar coercion helpers shared by the payload decoders.

Both helpers are total: they never raise on malformed text and report
failure by returning the input (for text) or ``None`` (for numbers).
"""
import base64
import math
from typing import Optional, Union

from levelboard.constants import BASE64_RE, DECIMAL_NUMBER_RE, INTEGER_LITERAL_RE


def decode_text_safely(value: str) -> str:
    """Decode standard base64 to UTF-8 text, or return ``value`` unchanged.

    Only the RFC 4648 alphabet with canonical padding is accepted; url-safe
    or unpadded input is treated as plain text.
    """
    if not BASE64_RE.match(value):
        return value
    decoded = _utf8_or_none(base64.b64decode(value))
    return value if decoded is None else decoded


def _utf8_or_none(data: bytes) -> Optional[str]:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def int_or_none(digits: str) -> Optional[int]:
    """Convert an integer literal, or ``None`` past the interpreter's digit limit."""
    try:
        return int(digits)
    except ValueError:
        return None


def parse_optional_number(value: str) -> Optional[Union[int, float]]:
    """Parse a decimal literal, returning ``None`` instead of a zero default.

    Integral literals come back as ``int``; anything with a fraction or
    exponent comes back as ``float``. Blank, non-numeric and non-finite
    inputs all give ``None``.
    """
    text = (value or "").strip()
    if not text or not DECIMAL_NUMBER_RE.match(text):
        return None
    if INTEGER_LITERAL_RE.match(text):
        return int_or_none(text)
    number = float(text)
    if not math.isfinite(number):
        return None
    return number
