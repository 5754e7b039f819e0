from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field

from eshop.common.constants import UserRole
from eshop.shared.models.common import DocumentModel, ImageDTO, RequestModel


class AddressDTO(RequestModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="allow")

    id: Optional[str] = Field(default=None, alias="_id")
    country: Optional[str] = None
    city: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    zip_code: Optional[str] = Field(default=None, alias="zipCode")
    address_type: Optional[str] = Field(default=None, alias="addressType")


class UserDTO(DocumentModel):
    """Buyer account. The password hash is never part of it."""

    id: str = Field(alias="_id")
    name: str
    email: str
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    addresses: list[dict[str, Any]] = Field(default_factory=list)
    role: str = UserRole.USER.value
    avatar: Optional[ImageDTO] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class CreateUserRequest(RequestModel):
    name: str
    email: str
    password: str = Field(min_length=4)
    avatar: Optional[ImageDTO] = None


class LoginRequest(RequestModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateUserInfoRequest(RequestModel):
    email: str
    password: str
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    name: str


class UpdateAvatarRequest(RequestModel):
    avatar: ImageDTO


class UpdatePasswordRequest(RequestModel):
    old_password: str = Field(alias="oldPassword")
    new_password: str = Field(alias="newPassword", min_length=4)
    confirm_password: str = Field(alias="confirmPassword")
