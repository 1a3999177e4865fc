"""
Import all models to ensure they are registered with SQLAlchemy
"""
from app.models.user import User
from app.models.movie import Movie
from app.models.review import Review
from app.models.diary import DiaryEntry
from app.models.user_interaction import UserInteraction

__all__ = [
    "User",
    "Movie",
    "Review",
    "DiaryEntry",
    "UserInteraction"
]
