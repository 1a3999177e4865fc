from sqlalchemy import Column, Integer, String, Float, JSON, DateTime, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base

class Movie(Base):
    __tablename__ = "movies"
    
    id = Column(Integer, primary_key=True, index=True)
    tmdb_id = Column(Integer, unique=True, nullable=True, index=True)  # Set when the movie is also known to TMDB
    title = Column(String(500), nullable=False)
    genres = Column(JSON, default=list)  # ["Drama", "Crime"]
    release_year = Column(Integer, index=True)
    director = Column(String(255))
    cast = Column(JSON, default=list)  # ["Actor One", "Actor Two"]
    synopsis = Column(Text)
    poster_url = Column(String(500))

    # Derived from reviews, maintained by ReviewService.create_review
    average_rating = Column(Float, default=0.0, nullable=False, index=True)
    review_count = Column(Integer, default=0, nullable=False)
    rating_sum = Column(Float, default=0.0, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reviews = relationship("Review", back_populates="movie", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}')>"
