from fastapi import Depends

from eshop.infra.database import get_db
from eshop.services.coupons.repository import CouponRepository
from eshop.services.coupons.service import CouponService


def get_coupon_repository() -> CouponRepository:
    return CouponRepository(get_db())


def get_coupon_service(repository: CouponRepository = Depends(get_coupon_repository)) -> CouponService:
    return CouponService(repository)
