"""
Error taxonomy for the API.

Services raise these; the handlers in app.main render every HTTPException
as a JSON ``{"message": ...}`` body with the matching status code.
"""
from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Malformed or out-of-range input"""

    def __init__(self, message: str = "Invalid request."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


class NotFoundError(HTTPException):
    """Missing user or movie"""

    def __init__(self, message: str = "Not found."):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)


class ConflictError(HTTPException):
    """Duplicate email or username. Reported as 400, not 409, to match existing clients."""

    def __init__(self, message: str = "Already exists."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
