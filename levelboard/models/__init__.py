"""Aggregate exports for API models."""
from .hall_of_fame import HofResult, HofRow
from .levels import LevelEntry, LevelListResult, LevelRecordFields
from .requests import (
    AuthRequest,
    HofRequest,
    LevelSearchRequest,
    RawPayloadRequest,
    SessionRequest,
)
from .responses import AuthResponse, HofResponse, LevelListResponse

__all__ = [
    "HofResult",
    "HofRow",
    "LevelEntry",
    "LevelListResult",
    "LevelRecordFields",
    "AuthRequest",
    "HofRequest",
    "LevelSearchRequest",
    "RawPayloadRequest",
    "SessionRequest",
    "AuthResponse",
    "HofResponse",
    "LevelListResponse",
]
