import uuid

from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.common.logger import log_info
from eshop.common.constants import TypeMsg
from eshop.services.auth.security import create_access_token, hash_password, verify_password
from eshop.services.users.repository import UserRepository
from eshop.shared.models.user_dto import (
    AddressDTO,
    CreateUserRequest,
    LoginRequest,
    UpdateAvatarRequest,
    UpdatePasswordRequest,
    UpdateUserInfoRequest,
    UserDTO,
)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def register_user(self, request: CreateUserRequest) -> tuple[UserDTO, str]:
        """Creates a buyer account and signs a session token for it."""
        if await self.repository.get_user_by_email(request.email):
            raise ValidationError("User already exists")

        avatar = request.avatar.model_dump() if request.avatar else None
        row = await self.repository.create_user(
            request.name, request.email, hash_password(request.password), avatar
        )
        user = UserDTO.model_validate(row)
        await log_info(f"User registered: {user.id}", type_msg=TypeMsg.INFO)
        return user, create_access_token(user.id)

    async def login(self, request: LoginRequest) -> tuple[UserDTO, str]:
        if not request.email or not request.password:
            raise ValidationError("Please provide all fields!")

        row = await self.repository.get_credentials_by_email(request.email)
        if not row:
            raise ValidationError("User doesn't exist!")

        if not verify_password(request.password, row.pop("password", None)):
            raise ValidationError("Please provide the correct information")

        user = UserDTO.model_validate(row)
        return user, create_access_token(user.id)

    async def get_user(self, user_id: str) -> UserDTO:
        row = await self.repository.get_user_by_id(user_id)
        if not row:
            raise NotFoundError("User doesn't exist")
        return UserDTO.model_validate(row)

    async def get_user_info(self, user_id: str) -> UserDTO:
        row = await self.repository.get_user_by_id(user_id)
        if not row:
            raise NotFoundError("User not found")
        return UserDTO.model_validate(row)

    async def update_info(self, user_id: str, request: UpdateUserInfoRequest) -> UserDTO:
        password_hash = await self.repository.get_password_hash(user_id)
        if password_hash is None:
            raise NotFoundError("User not found")
        if not verify_password(request.password, password_hash):
            raise ValidationError("Please provide the correct information")

        row = await self.repository.update_info(user_id, request.name, request.email, request.phone_number)
        if not row:
            raise NotFoundError("User not found")
        return UserDTO.model_validate(row)

    async def update_avatar(self, user_id: str, request: UpdateAvatarRequest) -> UserDTO:
        row = await self.repository.update_avatar(user_id, request.avatar.model_dump())
        if not row:
            raise NotFoundError("User not found")
        return UserDTO.model_validate(row)

    async def update_addresses(self, user_id: str, address: AddressDTO) -> UserDTO:
        """
        Adds an address or replaces the one with the same `_id`.
        Only one address per addressType is allowed.
        """
        user = await self.get_user(user_id)
        addresses = [dict(a) for a in user.addresses]

        same_type = next(
            (
                a for a in addresses
                if a.get("addressType") == address.address_type and a.get("_id") != address.id
            ),
            None,
        )
        if same_type is not None:
            raise ValidationError(f"{address.address_type} address already exists")

        payload = address.model_dump(by_alias=True, exclude_none=True)
        existing = next((a for a in addresses if address.id and a.get("_id") == address.id), None)
        if existing is not None:
            existing.update(payload)
        else:
            payload["_id"] = address.id or uuid.uuid4().hex
            addresses.append(payload)

        row = await self.repository.update_addresses(user_id, addresses)
        if not row:
            raise NotFoundError("User doesn't exist")
        return UserDTO.model_validate(row)

    async def delete_address(self, user_id: str, address_id: str) -> UserDTO:
        user = await self.get_user(user_id)
        addresses = [a for a in user.addresses if a.get("_id") != address_id]
        row = await self.repository.update_addresses(user_id, addresses)
        if not row:
            raise NotFoundError("User doesn't exist")
        return UserDTO.model_validate(row)

    async def update_password(self, user_id: str, request: UpdatePasswordRequest) -> None:
        password_hash = await self.repository.get_password_hash(user_id)
        if password_hash is None:
            raise NotFoundError("User not found")
        if not verify_password(request.old_password, password_hash):
            raise ValidationError("Old password is incorrect!")
        if request.new_password != request.confirm_password:
            raise ValidationError("Password doesn't match with each other!")

        await self.repository.update_password(user_id, hash_password(request.new_password))
        await log_info(f"Password changed for user {user_id}", type_msg=TypeMsg.INFO)

    async def get_all_users(self) -> list[UserDTO]:
        rows = await self.repository.get_all_users()
        return [UserDTO.model_validate(row) for row in rows]

    async def delete_user(self, user_id: str) -> None:
        if not await self.repository.delete_user(user_id):
            raise NotFoundError("User is not available with this id")
        await log_info(f"User deleted: {user_id}", type_msg=TypeMsg.INFO)
