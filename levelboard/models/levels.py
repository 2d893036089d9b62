"""Level listing models."""
from typing import List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]


class LevelRecordFields(BaseModel):
    """Named view of one tokenized level record, before any decoding.

    Every field is the raw wire text; absent fields read as "".
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level_id: str = Field("", alias="levelId")
    level_author: str = Field("", alias="levelAuthor")
    level_rating: str = Field("", alias="levelRating")
    level_difficulty: str = Field("", alias="levelDifficulty")
    level_downloads: str = Field("", alias="levelDownloads")
    level_top_times: str = Field("", alias="levelTopTimes")

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> "LevelRecordFields":
        return cls.model_validate(dict(fields))


class LevelEntry(BaseModel):
    """A decoded level summary as listed by the game server."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level_id: str = Field(..., alias="levelId", min_length=1, description="Decoded level identifier")
    level_author: str = Field("", alias="levelAuthor", description="Decoded author name")
    level_rating: Optional[Number] = Field(None, alias="levelRating", description="Average rating, if numeric")
    level_difficulty: str = Field("", alias="levelDifficulty", description="Difficulty tier; empty means unset")
    level_downloads: Optional[Number] = Field(None, alias="levelDownloads", description="Download count, if numeric")
    level_top_times_raw: str = Field("", alias="levelTopTimesRaw", description="Undecoded top times blob")


class LevelListResult(BaseModel):
    """One page of decoded levels, in server order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    levels: List[LevelEntry] = Field(default_factory=list)
    has_more_levels: bool = Field(False, alias="hasMoreLevels")
