from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from eshop.common.constants import UserRole
from eshop.shared.models.common import DocumentModel, ImageDTO, RequestModel


class ShopDTO(DocumentModel):
    """Seller account. The password hash is never part of it."""

    id: str = Field(alias="_id")
    name: str
    email: str
    description: Optional[str] = None
    address: str
    phone_number: str = Field(alias="phoneNumber")
    role: str = UserRole.SELLER.value
    avatar: Optional[ImageDTO] = None
    zip_code: str = Field(alias="zipCode")
    withdraw_method: Optional[dict[str, Any]] = Field(default=None, alias="withdrawMethod")
    available_balance: float = Field(default=0.0, alias="availableBalance")
    transections: list[dict[str, Any]] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class CreateShopRequest(RequestModel):
    name: str
    email: str
    password: str = Field(min_length=6)
    avatar: Optional[ImageDTO] = None
    address: str
    phone_number: str = Field(alias="phoneNumber")
    zip_code: str = Field(alias="zipCode")
    description: Optional[str] = None


class LoginShopRequest(RequestModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateShopAvatarRequest(RequestModel):
    avatar: ImageDTO


class UpdateSellerInfoRequest(RequestModel):
    name: str
    description: Optional[str] = None
    address: str
    phone_number: str = Field(alias="phoneNumber")
    zip_code: str = Field(alias="zipCode")


class UpdatePaymentMethodsRequest(RequestModel):
    withdraw_method: dict[str, Any] = Field(alias="withdrawMethod")
