from sqlalchemy.orm import Session
from typing import List

from app.models.diary import DiaryEntry
from app.models.movie import Movie
from app.models.user import User
from app.schemas.diary import DiaryEntryCreate
from app.utils.exceptions import NotFoundError, ValidationError


class DiaryService:
    """Append-only viewing diary"""

    @staticmethod
    def _ensure_user(db: Session, user_id: int) -> None:
        if not db.get(User, user_id):
            raise NotFoundError("User not found")

    @staticmethod
    def get_entries(db: Session, user_id: int) -> List[DiaryEntry]:
        """Diary entries for a user, most recently watched first"""
        DiaryService._ensure_user(db, user_id)
        return db.query(DiaryEntry).filter(
            DiaryEntry.user_id == user_id
        ).order_by(
            DiaryEntry.watched_date.desc(), DiaryEntry.id.desc()
        ).all()

    @staticmethod
    def add_entry(db: Session, user_id: int, entry_data: DiaryEntryCreate) -> DiaryEntry:
        """Log a viewing. Repeated entries for the same movie and date are allowed."""
        DiaryService._ensure_user(db, user_id)
        if not db.get(Movie, entry_data.movie_id):
            raise ValidationError("Movie does not exist")

        entry = DiaryEntry(user_id=user_id, **entry_data.model_dump())
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry
