from pydantic import EmailStr, Field, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional

from app.schemas.base import CamelModel
from app.schemas.movie import MovieResponse


class UserResponse(CamelModel):
    """Public user fields. The password hash is never part of a response."""
    id: int
    email: str
    username: str
    profile_picture: Optional[str] = None
    join_date: Optional[datetime] = None
    watchlist: List[int] = []


class UserProfileResponse(UserResponse):
    """User with the watchlist expanded into movies"""
    watchlist: List[MovieResponse] = []


class UserUpdate(CamelModel):
    """Editable profile fields; anything else (e.g. password) is rejected"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    username: Optional[str] = Field(None, min_length=3, max_length=30, pattern=r'^[a-zA-Z0-9_.+-]+$')
    email: Optional[EmailStr] = None
    profile_picture: Optional[str] = Field(None, max_length=500)
