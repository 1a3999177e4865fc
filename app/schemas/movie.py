"""
Movie Schemas - catalog request/response shapes
"""

from pydantic import Field
from datetime import datetime
from typing import List, Optional

from app.schemas.base import CamelModel
from app.schemas.validation import MAX_ID


class MovieCreate(CamelModel):
    """Schema for adding a movie to the catalog. Derived rating fields are not accepted."""
    title: str = Field(..., min_length=1, max_length=500)
    genres: List[str] = Field(default_factory=list, description="Genre names, e.g. ['Drama', 'Crime']")
    release_year: Optional[int] = Field(None, ge=1870, le=2100)
    director: Optional[str] = Field(None, max_length=255)
    cast: List[str] = Field(default_factory=list)
    synopsis: Optional[str] = None
    poster_url: Optional[str] = Field(None, max_length=500)
    tmdb_id: Optional[int] = Field(None, gt=0, le=MAX_ID, description="TMDB movie ID, used for metadata enrichment")


class MovieResponse(CamelModel):
    id: int
    tmdb_id: Optional[int] = None
    title: str
    genres: List[str] = []
    release_year: Optional[int] = None
    director: Optional[str] = None
    cast: List[str] = []
    synopsis: Optional[str] = None
    poster_url: Optional[str] = None
    average_rating: float = 0.0
    review_count: int = 0
    created_at: Optional[datetime] = None


class MovieSummary(CamelModel):
    """Minimal movie fields attached to a user's review listing"""
    title: str = "Unknown"
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
