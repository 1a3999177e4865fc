from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.movie import MovieCreate, MovieResponse
from app.schemas.review import MovieDetailResponse, ReviewCreate, ReviewResponse
from app.schemas.validation import MAX_ID, validate_pagination
from app.services.movie_service import MovieService
from app.services.review_service import ReviewService

router = APIRouter(prefix="/movies", tags=["Movies"])


# ============================================
# Catalog
# ============================================

@router.get("", response_model=List[MovieResponse])
def list_movies(
    page: int = Query(1, description="Page number (1-indexed, clamped to 1..10000)"),
    limit: int = Query(10, description="Movies per page (clamped to 1..100)"),
    genre: Optional[str] = Query(None, max_length=100, description="Exact genre name"),
    year: Optional[int] = Query(None, ge=-MAX_ID, le=MAX_ID, description="Release year"),
    rating: Optional[float] = Query(None, description="Minimum average rating"),
    db: Session = Depends(get_db)
):
    """
    List movies with filters and pagination

    - **genre**: movies whose genre list contains this genre
    - **year**: movies released in this year
    - **rating**: movies with an average rating of at least this value

    Returns a plain array; no total count is included.
    """
    page, limit = validate_pagination(page, limit)
    return MovieService.list_movies(db, page, limit, genre, year, rating)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(movie_data: MovieCreate, db: Session = Depends(get_db)):
    """Add a movie to the catalog"""
    return MovieService.create_movie(db, movie_data)


@router.get("/{movie_id}", response_model=MovieDetailResponse)
def get_movie(movie_id: int = Path(..., gt=0, le=MAX_ID, description="Movie ID"), db: Session = Depends(get_db)):
    """Get a movie with its reviews (newest first, author included)"""
    return MovieService.get_movie_with_reviews(db, movie_id)


# ============================================
# Reviews of a movie
# ============================================

@router.get("/{movie_id}/reviews", response_model=List[ReviewResponse])
def get_movie_reviews(movie_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """All reviews for a movie, newest first"""
    return ReviewService.get_movie_reviews(db, movie_id)


@router.post("/{movie_id}/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_movie_review(review_data: ReviewCreate, movie_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """
    Review a movie

    - **userId**: author (required)
    - **username**: display name (defaults to the author's username)
    - **rating**: 1 to 5 (required)
    - **text**: review body (optional)

    The movie's average rating is updated in the same request.
    """
    return ReviewService.create_review(db, movie_id, review_data)
