"""
Security middleware for the Movie Diary API
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import os


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to every response"""

    # Poster images may come from TMDB or any HTTPS host given in Movie.poster_url
    CSP_DIRECTIVES = [
        "default-src 'self'",
        "img-src 'self' https: data:",
        "frame-ancestors 'none'",
    ]

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # Swagger UI loads its assets from a CDN, so the docs pages keep the default policy
        if not request.url.path.startswith(("/docs", "/redoc")):
            response.headers["Content-Security-Policy"] = "; ".join(self.CSP_DIRECTIVES)

        if os.getenv("ENVIRONMENT") == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        return response
