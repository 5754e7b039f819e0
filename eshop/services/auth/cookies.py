from datetime import datetime, timedelta, timezone

from fastapi import Response

from eshop.config import settings


def set_session_cookie(response: Response, cookie_name: str, token: str) -> None:
    """Stores a session token in an http-only cookie."""
    expires = datetime.now(timezone.utc) + timedelta(days=settings.auth.JWT_EXPIRES_DAYS)
    response.set_cookie(
        key=cookie_name,
        value=token,
        expires=expires,
        httponly=True,
        secure=settings.auth.COOKIE_SECURE,
        samesite=settings.auth.COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response, cookie_name: str) -> None:
    response.delete_cookie(
        key=cookie_name,
        httponly=True,
        secure=settings.auth.COOKIE_SECURE,
        samesite=settings.auth.COOKIE_SAMESITE,
    )
