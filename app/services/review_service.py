"""
Review Service - Handle all review-related business logic
Keeps Movie.average_rating in sync with the reviews table.
"""

from concurrent.futures import ThreadPoolExecutor
from sqlalchemy.orm import Session, joinedload
from typing import Dict, List, Optional
import logging
import os

from app.models.movie import Movie
from app.models.review import Review
from app.models.user import User
from app.schemas.movie import MovieSummary
from app.schemas.review import ReviewCreate, ReviewResponse
from app.services.tmdb_service import TMDBService
from app.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

TMDB_MAX_WORKERS = int(os.getenv("TMDB_MAX_WORKERS", "8"))
PLACEHOLDER_SUMMARY = {"title": "Unknown", "poster_path": None, "release_date": None}


class ReviewService:
    """Service for movie review operations"""

    @staticmethod
    def create_review(db: Session, movie_id: Optional[int], review_data: ReviewCreate) -> Review:
        """
        Store a review and fold its rating into the movie's average.

        The average is updated with one UPDATE on the running sum and count,
        in the same transaction as the insert, so concurrent reviews for the
        same movie cannot overwrite each other's contribution.

        Args:
            db: Database session
            movie_id: Reviewed movie ID
            review_data: ReviewCreate schema with author, rating and text

        Returns:
            The new Review

        Raises:
            ValidationError: If the movie or user reference is missing or unknown
        """
        if movie_id is None or not db.get(Movie, movie_id):
            raise ValidationError("Movie does not exist")

        user = db.get(User, review_data.user_id)
        if not user:
            raise ValidationError("User does not exist")

        review = Review(
            movie_id=movie_id,
            user_id=user.id,
            username=review_data.username or user.username,
            rating=review_data.rating,
            text=review_data.text
        )
        db.add(review)
        db.flush()

        rating = review_data.rating
        db.query(Movie).filter(Movie.id == movie_id).update(
            {
                Movie.rating_sum: Movie.rating_sum + rating,
                Movie.review_count: Movie.review_count + 1,
                Movie.average_rating: (Movie.rating_sum + rating) / (Movie.review_count + 1),
            },
            synchronize_session=False
        )
        db.commit()
        db.refresh(review)

        logger.info(f"User {review.user_id} reviewed movie {movie_id} ({rating})")
        return review

    @staticmethod
    def get_movie_reviews(db: Session, movie_id: int) -> List[Review]:
        """All reviews for a movie, newest first"""
        return db.query(Review).filter(
            Review.movie_id == movie_id
        ).order_by(
            Review.created_at.desc(), Review.id.desc()
        ).all()

    @staticmethod
    def get_user_reviews(db: Session, user_id: int) -> List[Dict]:
        """
        All reviews by a user, newest first, each with a movie summary.

        Movies linked to TMDB are looked up there, one request per distinct
        movie, run concurrently. A failed lookup yields the "Unknown"
        placeholder for that movie only; the listing itself never fails
        because of TMDB.
        """
        reviews = db.query(Review).options(
            joinedload(Review.movie)
        ).filter(
            Review.user_id == user_id
        ).order_by(
            Review.created_at.desc(), Review.id.desc()
        ).all()

        tmdb_ids = {r.movie.tmdb_id for r in reviews if r.movie is not None and r.movie.tmdb_id}
        remote = ReviewService._fetch_summaries(tmdb_ids)

        results = []
        for review in reviews:
            data = ReviewResponse.model_validate(review).model_dump()
            data["movie"] = MovieSummary(**ReviewService._summary_for(review.movie, remote))
            results.append(data)
        return results

    @staticmethod
    def _fetch_summaries(tmdb_ids: set) -> Dict[int, Dict]:
        if not tmdb_ids:
            return {}
        ordered = sorted(tmdb_ids)
        with ThreadPoolExecutor(max_workers=min(TMDB_MAX_WORKERS, len(ordered))) as pool:
            summaries = pool.map(ReviewService._fetch_summary, ordered)
            return dict(zip(ordered, summaries))

    @staticmethod
    def _fetch_summary(tmdb_id: int) -> Dict:
        try:
            return TMDBService.get_movie_summary(tmdb_id)
        except Exception as e:
            # Enrichment is best-effort
            logger.warning(f"Movie enrichment failed for TMDB id {tmdb_id}: {str(e)}")
            return dict(PLACEHOLDER_SUMMARY)

    @staticmethod
    def _summary_for(movie: Optional[Movie], remote: Dict[int, Dict]) -> Dict:
        if movie is None:
            return dict(PLACEHOLDER_SUMMARY)
        if movie.tmdb_id:
            return remote.get(movie.tmdb_id, dict(PLACEHOLDER_SUMMARY))
        return {
            "title": movie.title,
            "poster_path": movie.poster_url,
            "release_date": str(movie.release_year) if movie.release_year else None,
        }
