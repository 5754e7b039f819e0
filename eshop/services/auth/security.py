# eshop/services/auth/security.py
"""
Password hashing (bcrypt) and session tokens (JWT).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from eshop.common.exceptions import AppError, AuthenticationError
from eshop.config import settings

BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    """Returns a bcrypt hash of the password."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str | None, password_hash: str | None) -> bool:
    """True when the password matches the stored hash."""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _secret_key() -> str:
    key = settings.auth.JWT_SECRET_KEY
    if not key:
        raise AppError("JWT_SECRET_KEY must be defined")
    return key


def create_access_token(subject_id: str, expires_days: int | None = None) -> str:
    """
    Signs a session token for a user or a shop.

    Args:
        subject_id: Account id stored under the "id" claim
        expires_days: Lifetime, JWT_EXPIRES_DAYS by default
    """
    days = expires_days if expires_days is not None else settings.auth.JWT_EXPIRES_DAYS
    payload = {
        "id": subject_id,
        "exp": datetime.now(timezone.utc) + timedelta(days=days),
    }
    return jwt.encode(payload, _secret_key(), algorithm=settings.auth.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verifies a session token and returns its claims.

    Raises:
        AuthenticationError: expired, malformed or wrongly signed token
    """
    try:
        payload = jwt.decode(token, _secret_key(), algorithms=[settings.auth.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")

    if not payload.get("id"):
        raise AuthenticationError("Invalid token")
    return payload
