from fastapi import APIRouter, Depends, Response, status

from eshop.config import settings
from eshop.services.auth.cookies import clear_session_cookie, set_session_cookie
from eshop.services.auth.dependencies import AuthContext, get_current_seller, require_admin
from eshop.services.shops.dependencies import get_shop_service
from eshop.services.shops.service import ShopService
from eshop.shared.models.shop_dto import (
    CreateShopRequest,
    LoginShopRequest,
    UpdatePaymentMethodsRequest,
    UpdateSellerInfoRequest,
    UpdateShopAvatarRequest,
)

router = APIRouter(prefix="/shop", tags=["Shops"])


@router.post("/create-shop", status_code=status.HTTP_201_CREATED)
async def create_shop(
    request: CreateShopRequest,
    response: Response,
    service: ShopService = Depends(get_shop_service),
):
    seller, token = await service.register_shop(request)
    set_session_cookie(response, settings.auth.SELLER_COOKIE_NAME, token)
    return {"success": True, "user": seller, "token": token}


@router.post("/login-shop", status_code=status.HTTP_201_CREATED)
async def login_shop(
    request: LoginShopRequest,
    response: Response,
    service: ShopService = Depends(get_shop_service),
):
    seller, token = await service.login(request)
    set_session_cookie(response, settings.auth.SELLER_COOKIE_NAME, token)
    return {"success": True, "user": seller, "token": token}


@router.get("/getSeller")
async def get_seller(
    auth: AuthContext = Depends(get_current_seller),
    service: ShopService = Depends(get_shop_service),
):
    seller = await service.get_seller(auth.seller_id)
    return {"success": True, "seller": seller}


@router.get("/logout", status_code=status.HTTP_201_CREATED)
async def logout(response: Response):
    clear_session_cookie(response, settings.auth.SELLER_COOKIE_NAME)
    return {"success": True, "message": "Log out successful!"}


@router.get("/get-shop-info/{shop_id}", status_code=status.HTTP_201_CREATED)
async def get_shop_info(
    shop_id: str,
    service: ShopService = Depends(get_shop_service),
):
    shop = await service.get_shop_info(shop_id)
    return {"success": True, "shop": shop}


@router.put("/update-shop-avatar")
async def update_shop_avatar(
    request: UpdateShopAvatarRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: ShopService = Depends(get_shop_service),
):
    seller = await service.update_avatar(auth.seller_id, request)
    return {"success": True, "seller": seller}


@router.put("/update-seller-info", status_code=status.HTTP_201_CREATED)
async def update_seller_info(
    request: UpdateSellerInfoRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: ShopService = Depends(get_shop_service),
):
    shop = await service.update_info(auth.seller_id, request)
    return {"success": True, "shop": shop}


@router.get("/admin-all-sellers", status_code=status.HTTP_201_CREATED)
async def admin_all_sellers(
    auth: AuthContext = Depends(require_admin),
    service: ShopService = Depends(get_shop_service),
):
    sellers = await service.get_all_sellers()
    return {"success": True, "sellers": sellers}


@router.delete("/delete-seller/{shop_id}", status_code=status.HTTP_201_CREATED)
async def delete_seller(
    shop_id: str,
    auth: AuthContext = Depends(require_admin),
    service: ShopService = Depends(get_shop_service),
):
    await service.delete_seller(shop_id)
    return {"success": True, "message": "Seller deleted successfully!"}


@router.put("/update-payment-methods", status_code=status.HTTP_201_CREATED)
async def update_payment_methods(
    request: UpdatePaymentMethodsRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: ShopService = Depends(get_shop_service),
):
    seller = await service.update_payment_methods(auth.seller_id, request)
    return {"success": True, "seller": seller}


@router.delete("/delete-withdraw-method", status_code=status.HTTP_201_CREATED)
async def delete_withdraw_method(
    auth: AuthContext = Depends(get_current_seller),
    service: ShopService = Depends(get_shop_service),
):
    seller = await service.delete_withdraw_method(auth.seller_id)
    return {"success": True, "seller": seller}
