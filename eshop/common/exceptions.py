# eshop/common/exceptions.py
"""
Domain errors.
Every error carries the HTTP status it is reported with; the API converts
them to the {"success": false, "error": ...} envelope.
"""

from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    status_code: int = 500

    def __init__(self, message: str = "An unknown error occurred", status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Missing or malformed input."""
    status_code = 400


class NotFoundError(AppError):
    """Referenced record does not exist."""
    status_code = 400


class AuthenticationError(AppError):
    """Missing or invalid session token."""
    status_code = 401


class PermissionDeniedError(AppError):
    """Authenticated, but the role may not use the resource."""
    status_code = 403
