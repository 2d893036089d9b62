"""Response models for API endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .hall_of_fame import HofRow
from .levels import LevelEntry


class AuthResponse(BaseModel):
    """Session credentials issued by the proxy."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    unique_id: str = Field(..., alias="uniqueId", description="Player id")
    token: str = Field(..., description="Session token")


class HofResponse(BaseModel):
    """Response model for hall of fame endpoints."""
    success: bool = Field(True, description="Operation success status")
    data: List[HofRow] = Field(..., description="Ranked leaderboard rows")
    count: int = Field(..., description="Number of rows returned")
    page: int = Field(1, description="Leaderboard page")
    timestamp: str = Field(..., description="Response timestamp")


class LevelListResponse(BaseModel):
    """Response model for level list endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, description="Operation success status")
    levels: List[LevelEntry] = Field(..., description="Decoded levels in server order")
    has_more_levels: bool = Field(False, alias="hasMoreLevels", description="Whether another page exists")
    count: int = Field(..., description="Number of levels returned")
    page: int = Field(1, description="Result page")
    timestamp: str = Field(..., description="Response timestamp")
