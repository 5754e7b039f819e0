from fastapi import APIRouter, Depends, status

from eshop.services.auth.dependencies import AuthContext, get_current_seller, require_admin
from eshop.services.orders.dependencies import get_order_service
from eshop.services.orders.service import OrderService
from eshop.shared.models.order_dto import CreateOrderRequest, UpdateOrderStatusRequest

router = APIRouter(prefix="/order", tags=["Orders"])


@router.post("/create-order", status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    service: OrderService = Depends(get_order_service),
):
    orders = await service.create_orders(request)
    return {"success": True, "orders": orders}


@router.get("/get-all-orders/{user_id}")
async def get_all_orders(
    user_id: str,
    service: OrderService = Depends(get_order_service),
):
    orders = await service.get_user_orders(user_id)
    return {"success": True, "orders": orders}


@router.get("/get-seller-all-orders/{shop_id}")
async def get_seller_all_orders(
    shop_id: str,
    service: OrderService = Depends(get_order_service),
):
    orders = await service.get_shop_orders(shop_id)
    return {"success": True, "orders": orders}


@router.put("/update-order-status/{order_id}")
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: OrderService = Depends(get_order_service),
):
    order = await service.update_order_status(order_id, request.status, auth.seller_id)
    return {"success": True, "order": order}


@router.put("/order-refund/{order_id}")
async def order_refund(
    order_id: str,
    request: UpdateOrderStatusRequest,
    service: OrderService = Depends(get_order_service),
):
    order = await service.request_refund(order_id, request.status)
    return {"success": True, "order": order, "message": "Order Refund Request successfully!"}


@router.put("/order-refund-success/{order_id}")
async def order_refund_success(
    order_id: str,
    request: UpdateOrderStatusRequest,
    auth: AuthContext = Depends(get_current_seller),
    service: OrderService = Depends(get_order_service),
):
    await service.accept_refund(order_id, request.status)
    return {"success": True, "message": "Order Refund successful!"}


@router.get("/admin-all-orders", status_code=status.HTTP_201_CREATED)
async def admin_all_orders(
    auth: AuthContext = Depends(require_admin),
    service: OrderService = Depends(get_order_service),
):
    orders = await service.get_all_orders()
    return {"success": True, "orders": orders}
