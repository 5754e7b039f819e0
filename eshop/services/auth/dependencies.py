# eshop/services/auth/dependencies.py
"""
FastAPI dependencies that resolve the caller's identity.

Handlers receive an explicit AuthContext instead of reading identity off the
request. The user session comes from the `token` cookie, the seller session
from `seller_token`; either may also be sent as `Authorization: Bearer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from eshop.common.exceptions import AuthenticationError, NotFoundError, PermissionDeniedError
from eshop.config import settings
from eshop.services.auth.security import decode_access_token
from eshop.services.shops.dependencies import get_shop_repository
from eshop.services.shops.repository import ShopRepository
from eshop.services.users.dependencies import get_user_repository
from eshop.services.users.repository import UserRepository
from eshop.shared.models.shop_dto import ShopDTO
from eshop.shared.models.user_dto import UserDTO


@dataclass
class AuthContext:
    """Authenticated identity passed to handlers."""

    user: Optional[UserDTO] = None
    seller: Optional[ShopDTO] = None

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user else None

    @property
    def seller_id(self) -> Optional[str]:
        return self.seller.id if self.seller else None


def extract_token(request: Request, cookie_name: str) -> Optional[str]:
    """Reads the session token from a cookie, falling back to a Bearer header."""
    token = request.cookies.get(cookie_name)
    if token:
        return token

    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def get_current_user(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
) -> AuthContext:
    token = extract_token(request, settings.auth.USER_COOKIE_NAME)
    if not token:
        raise AuthenticationError("Please login to continue")

    payload = decode_access_token(token)
    user = await users.get_user_by_id(payload["id"])
    if not user:
        raise AuthenticationError("User doesn't exist")

    return AuthContext(user=UserDTO.model_validate(user))


async def get_current_seller(
    request: Request,
    shops: ShopRepository = Depends(get_shop_repository),
) -> AuthContext:
    token = extract_token(request, settings.auth.SELLER_COOKIE_NAME)
    if not token:
        raise AuthenticationError("Please login to continue")

    payload = decode_access_token(token)
    seller = await shops.get_shop_by_id(payload["id"])
    if not seller:
        raise NotFoundError("Seller not found", status_code=404)

    return AuthContext(seller=ShopDTO.model_validate(seller))


async def require_admin(auth: AuthContext = Depends(get_current_user)) -> AuthContext:
    """Lets through authenticated users holding the admin role."""
    role = auth.user.role if auth.user else None
    if role != settings.auth.ADMIN_ROLE:
        raise PermissionDeniedError(f"{role} can not access this resources!")
    return auth
