"""Application errors mapped to HTTP status codes."""

from http import HTTPStatus


class AppError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = HTTPStatus.BAD_REQUEST


class AuthError(AppError):
    """Missing session or invalid credentials."""

    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(AppError):
    """Authenticated caller does not own the entity."""

    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(AppError):
    """Entity does not exist."""

    status_code = HTTPStatus.NOT_FOUND


class ConflictError(AppError):
    """Entity would violate a uniqueness rule."""

    status_code = HTTPStatus.CONFLICT


class ServerError(AppError):
    """Store or infrastructure failure."""
