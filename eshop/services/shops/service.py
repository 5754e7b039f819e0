from eshop.common.constants import TypeMsg
from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.common.logger import log_info
from eshop.services.auth.security import create_access_token, hash_password, verify_password
from eshop.services.shops.repository import ShopRepository
from eshop.shared.models.shop_dto import (
    CreateShopRequest,
    LoginShopRequest,
    ShopDTO,
    UpdatePaymentMethodsRequest,
    UpdateSellerInfoRequest,
    UpdateShopAvatarRequest,
)


class ShopService:
    def __init__(self, repository: ShopRepository):
        self.repository = repository

    async def register_shop(self, request: CreateShopRequest) -> tuple[ShopDTO, str]:
        """Creates a seller account and signs a session token for it."""
        if await self.repository.get_shop_by_email(request.email):
            raise ValidationError("User already exists")

        shop_data = request.model_dump()
        shop_data["password"] = hash_password(request.password)
        row = await self.repository.create_shop(shop_data)

        shop = ShopDTO.model_validate(row)
        await log_info(f"Shop registered: {shop.id}", type_msg=TypeMsg.INFO)
        return shop, create_access_token(shop.id)

    async def login(self, request: LoginShopRequest) -> tuple[ShopDTO, str]:
        if not request.email or not request.password:
            raise ValidationError("Please provide all fields!")

        row = await self.repository.get_credentials_by_email(request.email)
        if not row:
            raise ValidationError("User doesn't exist!")

        if not verify_password(request.password, row.pop("password", None)):
            raise ValidationError("Invalid email or password")

        shop = ShopDTO.model_validate(row)
        return shop, create_access_token(shop.id)

    async def get_seller(self, shop_id: str) -> ShopDTO:
        row = await self.repository.get_shop_by_id(shop_id)
        if not row:
            raise NotFoundError("User doesn't exist")
        return ShopDTO.model_validate(row)

    async def get_shop_info(self, shop_id: str) -> ShopDTO:
        row = await self.repository.get_shop_by_id(shop_id)
        if not row:
            raise NotFoundError("Shop not found")
        return ShopDTO.model_validate(row)

    async def update_avatar(self, shop_id: str, request: UpdateShopAvatarRequest) -> ShopDTO:
        row = await self.repository.update_avatar(shop_id, request.avatar.model_dump())
        if not row:
            raise NotFoundError("Seller not found", status_code=404)
        return ShopDTO.model_validate(row)

    async def update_info(self, shop_id: str, request: UpdateSellerInfoRequest) -> ShopDTO:
        row = await self.repository.update_info(
            shop_id,
            request.name,
            request.description,
            request.address,
            request.phone_number,
            request.zip_code,
        )
        if not row:
            raise NotFoundError("User not found")
        return ShopDTO.model_validate(row)

    async def update_payment_methods(self, shop_id: str, request: UpdatePaymentMethodsRequest) -> ShopDTO:
        row = await self.repository.update_withdraw_method(shop_id, request.withdraw_method)
        if not row:
            raise NotFoundError("Seller not found with this id")
        return ShopDTO.model_validate(row)

    async def delete_withdraw_method(self, shop_id: str) -> ShopDTO:
        row = await self.repository.update_withdraw_method(shop_id, None)
        if not row:
            raise NotFoundError("Seller not found with this id")
        return ShopDTO.model_validate(row)

    async def get_all_sellers(self) -> list[ShopDTO]:
        rows = await self.repository.get_all_shops()
        return [ShopDTO.model_validate(row) for row in rows]

    async def delete_seller(self, shop_id: str) -> None:
        if not await self.repository.delete_shop(shop_id):
            raise NotFoundError("Seller not available with this id")
        await log_info(f"Shop deleted: {shop_id}", type_msg=TypeMsg.INFO)
