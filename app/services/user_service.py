from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Dict, List
import logging

from app.models.movie import Movie
from app.models.user import User
from app.schemas.user import UserUpdate
from app.utils.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class UserService:
    """Service for user profile and profile-watchlist operations"""

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        user = db.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def _movies_by_ids(db: Session, movie_ids: List[int]) -> List[Movie]:
        """Load movies keeping the order of movie_ids; ids of deleted movies are skipped"""
        if not movie_ids:
            return []
        movies = {m.id: m for m in db.query(Movie).filter(Movie.id.in_(movie_ids)).all()}
        return [movies[i] for i in movie_ids if i in movies]

    @staticmethod
    def get_profile(db: Session, user_id: int) -> Dict:
        """User fields with the watchlist expanded into movies"""
        user = UserService.get_user(db, user_id)
        return {
            "id": user.id,
            "email": user.email,
            "username": user.username,
            "profile_picture": user.profile_picture,
            "join_date": user.join_date,
            "watchlist": UserService._movies_by_ids(db, list(user.watchlist or [])),
        }

    @staticmethod
    def update_user(db: Session, user_id: int, update_data: UserUpdate) -> User:
        user = UserService.get_user(db, user_id)
        changes = update_data.model_dump(exclude_unset=True)

        if changes.get("username") and db.query(User).filter(
            User.username == changes["username"], User.id != user.id
        ).first():
            raise ConflictError("Username already taken")

        if changes.get("email") and db.query(User).filter(
            User.email == changes["email"], User.id != user.id
        ).first():
            raise ConflictError("Email already registered")

        for field, value in changes.items():
            if field in ("username", "email") and value is None:
                continue  # Required columns cannot be cleared
            setattr(user, field, value)

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError("Username or email already in use")
        db.refresh(user)
        return user

    # ==================== PROFILE WATCHLIST ====================

    @staticmethod
    def get_watchlist(db: Session, user_id: int) -> List[Movie]:
        user = UserService.get_user(db, user_id)
        return UserService._movies_by_ids(db, list(user.watchlist or []))

    @staticmethod
    def add_to_watchlist(db: Session, user_id: int, movie_id: int) -> List[int]:
        """Add a movie id if it is not already present; returns the updated id list"""
        user = UserService.get_user(db, user_id)
        if not db.get(Movie, movie_id):
            raise ValidationError("Movie does not exist")

        watchlist = list(user.watchlist or [])
        if movie_id not in watchlist:
            watchlist.append(movie_id)
            # Reassign so SQLAlchemy sees the JSON column change
            user.watchlist = watchlist
            db.commit()
        return watchlist

    @staticmethod
    def remove_from_watchlist(db: Session, user_id: int, movie_id: int) -> List[int]:
        user = UserService.get_user(db, user_id)
        watchlist = [m for m in (user.watchlist or []) if m != movie_id]
        user.watchlist = watchlist
        db.commit()
        return watchlist
