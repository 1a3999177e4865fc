from pydantic import Field, field_validator
from datetime import datetime, timezone
from typing import Optional

from app.schemas.base import CamelModel
from app.schemas.validation import MAX_ID, SafeStringMixin


class DiaryEntryCreate(CamelModel, SafeStringMixin):
    """Schema for logging a viewing"""
    movie_id: int = Field(..., gt=0, le=MAX_ID)
    watched_date: datetime = Field(..., description="When the movie was watched")
    rating: Optional[float] = Field(None, ge=1, le=5)
    review_text: Optional[str] = Field(None, max_length=2000)

    @field_validator('watched_date')
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        """Store every watch time in UTC; naive values are taken as UTC already"""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @field_validator('review_text')
    @classmethod
    def clean_review_text(cls, v):
        return cls.clean_text(v)


class DiaryEntryResponse(CamelModel):
    id: int
    user_id: int
    movie_id: int
    watched_date: datetime
    rating: Optional[float] = None
    review_text: Optional[str] = None
