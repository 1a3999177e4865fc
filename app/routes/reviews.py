"""
Review Routes - alias paths for reviews keyed by movie or user
Same handlers as /movies/{id}/reviews and /users/{id}/reviews
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.review import ReviewCreateWithMovie, ReviewResponse, UserReviewResponse
from app.schemas.validation import MAX_ID
from app.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(review_data: ReviewCreateWithMovie, db: Session = Depends(get_db)):
    """Review a movie given by **movieId** in the body"""
    return ReviewService.create_review(db, review_data.movie_id, review_data)


# Must be registered before /{movie_id}
@router.get("/user/{user_id}", response_model=List[UserReviewResponse])
def get_user_reviews(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """A user's reviews with movie title/poster/release date (placeholder if TMDB is unavailable)"""
    return ReviewService.get_user_reviews(db, user_id)


@router.get("/{movie_id}", response_model=List[ReviewResponse])
def get_movie_reviews(movie_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """All reviews for a movie, newest first"""
    return ReviewService.get_movie_reviews(db, movie_id)
