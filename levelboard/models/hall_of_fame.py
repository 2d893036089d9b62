"""Hall of fame models."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class HofRow(BaseModel):
    """One ranked leaderboard row."""
    model_config = ConfigDict(frozen=True)

    rank: str = Field(..., description="Ordinal rank, e.g. '1st'")
    player: str = Field(..., description="Decoded player name")
    score: int


class HofResult(BaseModel):
    """Leaderboard rows sorted by score, highest first."""
    model_config = ConfigDict(frozen=True)

    rows: List[HofRow] = Field(default_factory=list)
