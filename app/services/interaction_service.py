"""
Interaction Service - per-user likes and watchlist toggles
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
import logging

from app.models.user import User
from app.models.user_interaction import UserInteraction
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def toggle_membership(values: List[int], movie_id: int) -> List[int]:
    """Remove movie_id if present, append it otherwise. Returns a new list."""
    if movie_id in values:
        return [v for v in values if v != movie_id]
    return [*values, movie_id]


class InteractionService:
    """Service for like/watchlist interaction records"""

    @staticmethod
    def upsert_interactions(db: Session, user_id: int) -> UserInteraction:
        """
        Return the user's interaction record, creating an empty one if none exists.

        Raises:
            NotFoundError: If the user does not exist
        """
        if not db.get(User, user_id):
            raise NotFoundError("User not found")

        record = db.query(UserInteraction).filter(UserInteraction.user_id == user_id).first()
        if record:
            return record

        record = UserInteraction(user_id=user_id, likes=[], watchlist=[])
        db.add(record)
        try:
            db.commit()
        except IntegrityError:
            # Created concurrently by another request
            db.rollback()
            return db.query(UserInteraction).filter(UserInteraction.user_id == user_id).one()
        db.refresh(record)
        logger.debug(f"Created interaction record for user {user_id}")
        return record

    @staticmethod
    def toggle_like(db: Session, user_id: int, movie_id: int) -> UserInteraction:
        record = InteractionService.upsert_interactions(db, user_id)
        record.likes = toggle_membership(list(record.likes or []), movie_id)
        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def toggle_watchlist(db: Session, user_id: int, movie_id: int) -> UserInteraction:
        record = InteractionService.upsert_interactions(db, user_id)
        record.watchlist = toggle_membership(list(record.watchlist or []), movie_id)
        db.commit()
        db.refresh(record)
        return record
