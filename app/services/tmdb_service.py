import requests
import os
from typing import Dict, Optional
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

# TMDB Service to interact with The Movie Database API
class TMDBService:
    BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
    API_KEY = os.getenv("TMDB_API_KEY")
    TIMEOUT = float(os.getenv("TMDB_TIMEOUT", "10"))

    # Internal method to make GET requests to TMDB API
    @classmethod
    def _make_request(cls, endpoint: str, params: Optional[Dict] = None) -> Dict:
        """
        Make HTTP request to TMDB API.
        
        Args:
            endpoint: API endpoint (e.g., "/movie/550")
            params: Query parameters
            
        Returns:
            JSON response from TMDB
            
        Raises:
            HTTPException: If API key is missing or request fails
        """
        if not cls.API_KEY:
            raise HTTPException(status_code=500, detail="TMDB API key not configured")
        params = dict(params or {})
        params['api_key'] = cls.API_KEY
        url = f"{cls.BASE_URL}{endpoint}"
    
        try:
            response = requests.get(url, params=params, timeout=cls.TIMEOUT)
            response.raise_for_status()
            logger.debug(f"TMDB API request successful: {endpoint}")
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"TMDB API error for {endpoint}: {str(e)}")
            raise HTTPException(status_code=502, detail=f"TMDB API error: {str(e)}")

    @classmethod
    def get_movie_details(cls, tmdb_id: int) -> Dict:
        """Get basic movie information for a TMDB movie ID."""
        return cls._make_request(f"/movie/{tmdb_id}")

    @classmethod
    def get_movie_summary(cls, tmdb_id: int) -> Dict:
        """
        Title, full poster URL and release date for a TMDB movie ID.
        Raises the same errors as _make_request.
        """
        details = cls.get_movie_details(tmdb_id)
        poster_path = details.get("poster_path")
        return {
            "title": details.get("title") or "Unknown",
            "poster_path": f"{cls.IMAGE_BASE_URL}{poster_path}" if poster_path else None,
            "release_date": details.get("release_date") or None,
        }
