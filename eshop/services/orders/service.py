# eshop/services/orders/service.py
"""
Order lifecycle.

Checkout splits a multi-seller cart into one order per seller. Status
transitions carry side effects on product inventory and seller balance:

    Processing -> Transferred to delivery partner -> Delivered
    Processing -> Refund Requested -> Refund Success

Side effects are applied one statement at a time; nothing is wrapped in a
transaction.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from eshop.common.constants import OrderStatus, PaymentStatus, TypeMsg
from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.common.logger import log_info, log_warning
from eshop.config import settings
from eshop.services.orders.repository import OrderRepository
from eshop.services.products.repository import ProductRepository
from eshop.services.shops.repository import ShopRepository
from eshop.shared.models.order_dto import CartItem, CreateOrderRequest, OrderDTO


def split_cart_by_shop(cart: list[CartItem]) -> dict[str, list[CartItem]]:
    """
    Groups cart lines by seller, keeping the order in which sellers first
    appear in the cart.
    """
    groups: dict[str, list[CartItem]] = {}
    for item in cart:
        groups.setdefault(item.shop_id, []).append(item)
    return groups


def _buyer_id(buyer: dict[str, Any]) -> Optional[str]:
    buyer_id = buyer.get("_id") or buyer.get("id")
    return str(buyer_id) if buyer_id is not None else None


class OrderService:
    def __init__(
        self,
        orders: OrderRepository,
        products: ProductRepository,
        shops: ShopRepository,
        service_charge_percent: Optional[float] = None,
    ):
        self.orders = orders
        self.products = products
        self.shops = shops
        if service_charge_percent is None:
            service_charge_percent = settings.marketplace.SERVICE_CHARGE_PERCENT
        self.service_charge_percent = service_charge_percent

    def seller_proceeds(self, total_price: float) -> float:
        """Order total minus the marketplace service charge."""
        service_charge = total_price * self.service_charge_percent / 100
        return total_price - service_charge

    async def create_orders(self, request: CreateOrderRequest) -> list[OrderDTO]:
        """
        Creates one order per seller found in the cart.

        Every order gets the buyer, shipping address, payment info and the
        combined cart total as given.

        Raises:
            ValidationError: a required field is missing
        """
        if (
            request.cart is None
            or request.shipping_address is None
            or request.user is None
            or not request.total_price
            or request.payment_info is None
        ):
            raise ValidationError("Missing required fields")

        buyer_id = _buyer_id(request.user)
        payment_info = request.payment_info.model_dump()

        created: list[OrderDTO] = []
        for shop_id, items in split_cart_by_shop(request.cart).items():
            row = await self.orders.create_order(
                {
                    "cart": [item.model_dump(by_alias=True) for item in items],
                    "shipping_address": request.shipping_address,
                    "buyer": request.user,
                    "buyer_id": buyer_id,
                    "shop_id": shop_id,
                    "total_price": request.total_price,
                    "payment_info": payment_info,
                }
            )
            created.append(OrderDTO.model_validate(row))

        await log_info(
            f"Created {len(created)} order(s) for buyer {buyer_id}",
            type_msg=TypeMsg.INFO,
            extra={"order_ids": [order.id for order in created]},
        )
        return created

    async def _get_order(self, order_id: str) -> OrderDTO:
        row = await self.orders.get_order_by_id(order_id)
        if not row:
            raise NotFoundError("Order not found with this id")
        return OrderDTO.model_validate(row)

    async def _shift_inventory(self, order: OrderDTO, direction: int) -> None:
        """
        Moves every line's quantity between stock and sold_out.
        direction=-1 takes units out of stock, +1 puts them back.
        """
        for item in order.cart:
            changed = await self.products.adjust_inventory(
                item.product_id,
                stock_delta=direction * item.qty,
                sold_out_delta=-direction * item.qty,
            )
            if not changed:
                await log_warning(
                    f"Inventory not tracked for product {item.product_id} (order {order.id})"
                )

    async def update_order_status(self, order_id: str, status: str, seller_id: Optional[str]) -> OrderDTO:
        """
        Seller-side transition.

        - "Transferred to delivery partner": units move from stock to sold_out
        - "Delivered": delivery time stamped, payment marked succeeded, and the
          seller's available balance overwritten with the proceeds
        - anything else is stored as given
        """
        order = await self._get_order(order_id)

        if status == OrderStatus.TRANSFERRED_TO_DELIVERY_PARTNER:
            await self._shift_inventory(order, direction=-1)

        delivered_at = None
        payment_info = None
        if status == OrderStatus.DELIVERED:
            delivered_at = datetime.now(timezone.utc)
            payment_info = order.payment_info.model_dump() if order.payment_info else {}
            payment_info["status"] = PaymentStatus.SUCCEEDED.value

            if seller_id:
                proceeds = self.seller_proceeds(order.total_price)
                await self.shops.set_available_balance(seller_id, proceeds)
                await log_info(
                    f"Seller {seller_id} balance set to {proceeds} after order {order_id}",
                    type_msg=TypeMsg.INFO,
                )

        row = await self.orders.update_status(order_id, status, delivered_at, payment_info)
        if not row:
            raise NotFoundError("Order not found with this id")

        await log_info(f"Order {order_id} status: {order.status} -> {status}", type_msg=TypeMsg.INFO)
        return OrderDTO.model_validate(row)

    async def request_refund(self, order_id: str, status: str) -> OrderDTO:
        """Buyer-side status change; the value is stored unvalidated."""
        await self._get_order(order_id)

        row = await self.orders.update_status(order_id, status)
        if not row:
            raise NotFoundError("Order not found with this id")

        await log_info(f"Refund requested for order {order_id}", type_msg=TypeMsg.INFO)
        return OrderDTO.model_validate(row)

    async def accept_refund(self, order_id: str, status: str) -> OrderDTO:
        """
        Seller-side refund settlement. On "Refund Success" the units go back
        from sold_out to stock.
        """
        order = await self._get_order(order_id)

        row = await self.orders.update_status(order_id, status)
        if not row:
            raise NotFoundError("Order not found with this id")

        if status == OrderStatus.REFUND_SUCCESS:
            await self._shift_inventory(order, direction=1)
            await log_info(f"Refund completed for order {order_id}", type_msg=TypeMsg.INFO)

        return OrderDTO.model_validate(row)

    async def get_user_orders(self, user_id: str) -> list[OrderDTO]:
        rows = await self.orders.get_orders_by_buyer(user_id)
        return [OrderDTO.model_validate(row) for row in rows]

    async def get_shop_orders(self, shop_id: str) -> list[OrderDTO]:
        rows = await self.orders.get_orders_by_shop(shop_id)
        return [OrderDTO.model_validate(row) for row in rows]

    async def get_all_orders(self) -> list[OrderDTO]:
        rows = await self.orders.get_all_orders()
        return [OrderDTO.model_validate(row) for row in rows]
