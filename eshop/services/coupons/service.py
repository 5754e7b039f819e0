from typing import Optional

from eshop.common.constants import TypeMsg
from eshop.common.exceptions import ValidationError
from eshop.common.logger import log_info
from eshop.services.coupons.repository import CouponRepository
from eshop.shared.models.coupon_dto import CouponCodeDTO, CreateCouponRequest


class CouponService:
    def __init__(self, repository: CouponRepository):
        self.repository = repository

    async def create_coupon(self, seller_id: str, request: CreateCouponRequest) -> CouponCodeDTO:
        if await self.repository.get_coupon_by_name(request.name):
            raise ValidationError("Coupon code already exists!")

        coupon_data = request.model_dump()
        coupon_data["shop_id"] = request.shop_id or seller_id

        row = await self.repository.create_coupon(coupon_data)
        coupon = CouponCodeDTO.model_validate(row)
        await log_info(f"Coupon {coupon.name} created for shop {coupon.shop_id}", type_msg=TypeMsg.INFO)
        return coupon

    async def get_shop_coupons(self, seller_id: str) -> list[CouponCodeDTO]:
        rows = await self.repository.get_coupons_by_shop(seller_id)
        return [CouponCodeDTO.model_validate(row) for row in rows]

    async def delete_coupon(self, coupon_id: str) -> None:
        if not await self.repository.delete_coupon(coupon_id):
            raise ValidationError("Coupon code doesn't exist!")

    async def get_coupon_value(self, name: str) -> Optional[CouponCodeDTO]:
        """Looks a coupon up by its code; None when there is no such code."""
        row = await self.repository.get_coupon_by_name(name)
        return CouponCodeDTO.model_validate(row) if row else None
