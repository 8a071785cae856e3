"""
Domain errors raised by services and mapped to HTTP responses in main.py.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Entity missing by id."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"


class ConflictError(ServiceError):
    """Unique constraint violated, before or during the write."""

    status_code = status.HTTP_409_CONFLICT
    error = "Conflict"


class UnauthorizedError(ServiceError):
    """Bad credentials or a missing, expired or invalid token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"
