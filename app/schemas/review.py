"""
Review Schemas - Pydantic models for review request/response validation
"""

from pydantic import Field, field_validator
from datetime import datetime
from typing import List, Optional

from app.schemas.base import CamelModel
from app.schemas.movie import MovieSummary, MovieResponse
from app.schemas.validation import MAX_ID, SafeStringMixin


class ReviewCreate(CamelModel, SafeStringMixin):
    """Schema for posting a review to /movies/{id}/reviews"""
    user_id: int = Field(..., gt=0, le=MAX_ID, description="Author's user ID")
    username: Optional[str] = Field(None, min_length=1, max_length=255, description="Defaults to the author's current username")
    rating: float = Field(..., ge=1, le=5, description="Rating value (1-5)")
    text: Optional[str] = Field(None, max_length=2000)

    @field_validator('username', 'text')
    @classmethod
    def clean_free_text(cls, v):
        return cls.clean_text(v)


class ReviewCreateWithMovie(ReviewCreate):
    """Schema for posting a review to /reviews, where the movie is in the body"""
    movie_id: int = Field(..., gt=0, le=MAX_ID, description="Reviewed movie ID")


class ReviewResponse(CamelModel):
    id: int
    movie_id: int
    user_id: int
    username: str
    rating: float
    text: Optional[str] = None
    created_at: Optional[datetime] = None


class ReviewAuthor(CamelModel):
    id: int
    username: str


class ReviewWithAuthorResponse(ReviewResponse):
    """Review with the author looked up from the users table"""
    user: Optional[ReviewAuthor] = None


class UserReviewResponse(ReviewResponse):
    """Review with movie metadata, as returned by a user's review listing"""
    movie: MovieSummary = Field(default_factory=MovieSummary)


class MovieDetailResponse(CamelModel):
    movie: MovieResponse
    reviews: List[ReviewWithAuthorResponse] = []
