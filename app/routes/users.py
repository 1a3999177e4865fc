from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from app.database import get_db
from app.schemas.diary import DiaryEntryCreate, DiaryEntryResponse
from app.schemas.interaction import InteractionResponse, MovieIdPayload
from app.schemas.movie import MovieResponse
from app.schemas.review import UserReviewResponse
from app.schemas.user import UserProfileResponse, UserResponse, UserUpdate
from app.schemas.validation import MAX_ID
from app.services.diary_service import DiaryService
from app.services.interaction_service import InteractionService
from app.services.review_service import ReviewService
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


# ==================== PROFILE ====================

@router.get("/{user_id}", response_model=UserProfileResponse)
def get_user(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Get a user profile with the watchlist expanded into movies"""
    return UserService.get_profile(db, user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(update_data: UserUpdate, user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """
    Update a user profile

    - **username**: must be unique
    - **email**: must be unique
    - **profilePicture**: image URL
    """
    return UserService.update_user(db, user_id, update_data)


@router.get("/{user_id}/reviews", response_model=List[UserReviewResponse])
def get_user_reviews(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """A user's reviews, newest first, with movie metadata"""
    return ReviewService.get_user_reviews(db, user_id)


# ==================== PROFILE WATCHLIST ====================

@router.get("/{user_id}/watchlist", response_model=List[MovieResponse])
def get_watchlist(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Movies on the user's profile watchlist"""
    return UserService.get_watchlist(db, user_id)


@router.post("/{user_id}/watchlist", response_model=List[int])
def add_to_watchlist(payload: MovieIdPayload, user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Add a movie to the profile watchlist (no-op if already there)"""
    return UserService.add_to_watchlist(db, user_id, payload.movie_id)


@router.delete("/{user_id}/watchlist/{movie_id}", response_model=List[int])
def remove_from_watchlist(user_id: int = Path(..., gt=0, le=MAX_ID), movie_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Remove a movie from the profile watchlist"""
    return UserService.remove_from_watchlist(db, user_id, movie_id)


# ==================== INTERACTIONS ====================

@router.get("/{user_id}/interactions", response_model=InteractionResponse)
def get_interactions(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Likes and watchlist ids; an empty record is created on first access"""
    return InteractionService.upsert_interactions(db, user_id)


@router.post("/{user_id}/watchlist/toggle", response_model=InteractionResponse)
def toggle_watchlist(payload: MovieIdPayload, user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Star/unstar a movie"""
    return InteractionService.toggle_watchlist(db, user_id, payload.movie_id)


@router.post("/{user_id}/likes/toggle", response_model=InteractionResponse)
def toggle_like(payload: MovieIdPayload, user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Like/unlike a movie"""
    return InteractionService.toggle_like(db, user_id, payload.movie_id)


# ==================== DIARY ====================

@router.get("/{user_id}/diary", response_model=List[DiaryEntryResponse])
def get_diary(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Diary entries, most recently watched first"""
    return DiaryService.get_entries(db, user_id)


@router.post("/{user_id}/diary", response_model=DiaryEntryResponse, status_code=status.HTTP_201_CREATED)
def add_diary_entry(entry_data: DiaryEntryCreate, user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """
    Log a viewing

    - **movieId**: watched movie (required)
    - **watchedDate**: when it was watched (required)
    - **rating**: 1 to 5 (optional)
    - **reviewText**: notes (optional)
    """
    return DiaryService.add_entry(db, user_id, entry_data)
