"""
Application error taxonomy.

Every error carries a client-facing message and an HTTP status; the
exception handler in ``bloghub.main`` renders it as ``{"error": message}``.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that are surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(AppError):
    """Uniqueness violation (duplicate email). Reported as 400 to match the frontend."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UpstreamError(AppError):
    """Identity provider rejected a request or could not be reached."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream provider error"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
