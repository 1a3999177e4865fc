"""
Movie Service - catalog listing, lookup and creation
"""

from sqlalchemy import String, cast
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from typing import Dict, List, Optional
import json
import logging

from app.models.movie import Movie
from app.models.review import Review
from app.schemas.movie import MovieCreate
from app.utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class MovieService:
    """Service for movie catalog operations"""

    @staticmethod
    def list_movies(
        db: Session,
        page: int = 1,
        limit: int = 10,
        genre: Optional[str] = None,
        year: Optional[int] = None,
        min_rating: Optional[float] = None
    ) -> List[Movie]:
        """
        List movies with optional filters and 1-indexed skip/limit pagination.

        Args:
            db: Database session
            page: Page number, starting at 1
            limit: Page size
            genre: Keep movies whose genre list contains exactly this genre
            year: Keep movies released in this year
            min_rating: Keep movies whose average rating is at least this value

        Returns:
            One page of movies in insertion order. No total count is computed.
        """
        query = db.query(Movie)

        if genre:
            # Genres are a JSON array; match the encoded element so "Drama" does not match "Docudrama"
            query = query.filter(cast(Movie.genres, String).contains(json.dumps(genre), autoescape=True))
        if year is not None:
            query = query.filter(Movie.release_year == year)
        if min_rating is not None:
            query = query.filter(Movie.average_rating >= min_rating)

        return query.order_by(Movie.id).offset((page - 1) * limit).limit(limit).all()

    @staticmethod
    def get_movie(db: Session, movie_id: int) -> Movie:
        movie = db.get(Movie, movie_id)
        if not movie:
            raise NotFoundError("Movie not found")
        return movie

    @staticmethod
    def get_movie_with_reviews(db: Session, movie_id: int) -> Dict:
        """Movie plus its reviews, each with the author loaded"""
        movie = MovieService.get_movie(db, movie_id)

        reviews = db.query(Review).options(
            joinedload(Review.user)
        ).filter(
            Review.movie_id == movie.id
        ).order_by(
            Review.created_at.desc(), Review.id.desc()
        ).all()

        return {"movie": movie, "reviews": reviews}

    @staticmethod
    def create_movie(db: Session, movie_data: MovieCreate) -> Movie:
        movie = Movie(**movie_data.model_dump())
        db.add(movie)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ValidationError(f"Could not save movie: {e.orig}")
        db.refresh(movie)
        logger.info(f"Added movie {movie.id} ({movie.title})")
        return movie
