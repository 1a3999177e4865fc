from sqlalchemy import Column, Integer, Float, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base


class DiaryEntry(Base):
    """
    Diary entry - one viewing of a movie by a user.
    Append-only: entries are never updated or deleted through the API.
    """
    __tablename__ = "diary_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    movie_id = Column(Integer, ForeignKey('movies.id', ondelete='CASCADE'), nullable=False, index=True)
    watched_date = Column(DateTime(timezone=True), nullable=False)
    rating = Column(Float, nullable=True)
    review_text = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="diary_entries")
    movie = relationship("Movie")

    def __repr__(self):
        return f"<DiaryEntry(user_id={self.user_id}, movie_id={self.movie_id}, watched_date={self.watched_date})>"
