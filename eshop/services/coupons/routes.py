from fastapi import APIRouter, Depends, status

from eshop.services.auth.dependencies import AuthContext, get_current_seller
from eshop.services.coupons.dependencies import get_coupon_service
from eshop.services.coupons.service import CouponService
from eshop.shared.models.coupon_dto import CreateCouponRequest

router = APIRouter(prefix="/coupon", tags=["Coupons"])


@router.post("/create-coupon-code", status_code=status.HTTP_201_CREATED)
async def create_coupon_code(
    request: CreateCouponRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: CouponService = Depends(get_coupon_service),
):
    coupon = await service.create_coupon(auth.seller_id, request)
    return {"success": True, "coupounCode": coupon}


@router.get("/get-coupon/{shop_id}")
async def get_coupon(
    shop_id: str,
    auth: AuthContext = Depends(get_current_seller),
    service: CouponService = Depends(get_coupon_service),
):
    # Coupons always belong to the signed-in seller; the path id is not used
    coupons = await service.get_shop_coupons(auth.seller_id)
    return {"success": True, "couponCodes": coupons}


@router.delete("/delete-coupon/{coupon_id}")
async def delete_coupon(
    coupon_id: str,
    auth: AuthContext = Depends(get_current_seller),
    service: CouponService = Depends(get_coupon_service),
):
    await service.delete_coupon(coupon_id)
    return {"success": True, "message": "Coupon code deleted successfully!"}


@router.get("/get-coupon-value/{name}")
async def get_coupon_value(
    name: str,
    service: CouponService = Depends(get_coupon_service),
):
    coupon = await service.get_coupon_value(name)
    return {"success": True, "couponCode": coupon}
