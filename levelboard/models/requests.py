"""Request models for API endpoints."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SortBy = Literal["ratings", "downloads", "recent", "newest", "date", "difficulty"]


class AuthRequest(BaseModel):
    """Optional credentials to re-use for the proxy handshake."""
    model_config = ConfigDict(populate_by_name=True)

    unique_id: Optional[str] = Field(None, alias="uniqueId", description="Previously issued player id")
    token: Optional[str] = Field(None, description="Previously issued session token")


class SessionRequest(BaseModel):
    """Credentials obtained from the authentication handshake."""
    model_config = ConfigDict(populate_by_name=True)

    unique_id: str = Field(..., alias="uniqueId", min_length=1, description="Player id from /auth")
    token: str = Field(..., min_length=1, description="Session token from /auth")


class HofRequest(SessionRequest):
    """Request model for the hall of fame endpoint."""
    page: int = Field(1, ge=1, description="Leaderboard page (1-based)")


class LevelSearchRequest(SessionRequest):
    """Request model for the level browser endpoint."""
    sort_by: SortBy = Field("ratings", alias="sortBy", description="Server-side sort order")
    page: int = Field(1, ge=1, description="Result page (1-based)")
    difficulty: str = Field("", description="Difficulty filter; empty string means no filter")
    search_filter: str = Field("", alias="searchFilter", description="Free-text search")
    with_thumbnails: bool = Field(False, alias="withThumbnails", description="Ask the server for thumbnails")


class RawPayloadRequest(BaseModel):
    """A raw response body to decode without contacting the proxy."""
    raw: str = Field(..., description="Raw text body exactly as the proxy returned it")
