from pydantic import Field
from typing import List

from app.schemas.base import CamelModel
from app.schemas.validation import MAX_ID


class MovieIdPayload(CamelModel):
    """Body of watchlist add and like/watchlist toggle requests"""
    movie_id: int = Field(..., gt=0, le=MAX_ID)


class InteractionResponse(CamelModel):
    """Current likes/watchlist state for a user"""
    user_id: int
    likes: List[int] = []
    watchlist: List[int] = []
