"""Application error taxonomy.

Every error carries the HTTP status it maps to; the app-level exception
handler in ``studyhub.main`` turns them into ``{"error": message}`` bodies.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or blank."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(AppError):
    """Password did not match the stored digest."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect password"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """Unique key already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Email exists"


class InfrastructureError(AppError):
    """Store or hashing failure."""
