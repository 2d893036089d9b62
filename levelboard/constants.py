"""Shared constants and wire-format markers for the Levelboard API."""
from __future__ import annotations

import re

API_VERSION = "1.0.0"
SERVICE_NAME = "Levelboard API"

# Level list wire format: "\levelId=<b64>&levelAuthor=<b64>&...\levelId=..."
LEVEL_RECORD_KEY = "levelId"
LEVEL_RECORD_MARKER = "\\levelId="
LEVEL_FIELD_SEPARATOR = "&"
LEVEL_KV_SEPARATOR = "="
LEVEL_PAGINATION_KEY = "hasMoreLevels"
LEVEL_PAGINATION_ON = "1"

# Hall of fame wire format: "<b64 name>,<score>/<tail>,<score>/<b64 name>,..."
HOF_TOKEN_SEPARATOR = ","
HOF_PAIR_SEPARATOR = "/"

BASE64_RE = re.compile(r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?\Z")
DECIMAL_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\Z", re.ASCII)
INTEGER_LITERAL_RE = re.compile(r"^[+-]?\d+\Z", re.ASCII)
LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)", re.ASCII)

__all__ = [
    "API_VERSION",
    "SERVICE_NAME",
    "LEVEL_RECORD_KEY",
    "LEVEL_RECORD_MARKER",
    "LEVEL_FIELD_SEPARATOR",
    "LEVEL_KV_SEPARATOR",
    "LEVEL_PAGINATION_KEY",
    "LEVEL_PAGINATION_ON",
    "HOF_TOKEN_SEPARATOR",
    "HOF_PAIR_SEPARATOR",
    "BASE64_RE",
    "DECIMAL_NUMBER_RE",
    "INTEGER_LITERAL_RE",
    "LEADING_INTEGER_RE",
]
