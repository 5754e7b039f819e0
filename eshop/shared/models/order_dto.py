from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field

from eshop.common.constants import OrderStatus
from eshop.shared.models.common import DocumentModel, RequestModel


class CartItem(DocumentModel):
    """
    One purchased line. Only the product and seller references and the
    quantity are interpreted; everything else is carried as given.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    product_id: str = Field(alias="_id")
    shop_id: str = Field(alias="shopId")
    qty: int = 1


class PaymentInfo(DocumentModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


class OrderDTO(DocumentModel):
    id: str = Field(alias="_id")
    cart: list[CartItem]
    shipping_address: dict[str, Any] = Field(alias="shippingAddress")
    buyer: dict[str, Any] = Field(alias="user")
    shop_id: Optional[str] = Field(default=None, alias="shopId")
    total_price: float = Field(alias="totalPrice")
    status: str = OrderStatus.PROCESSING.value
    payment_info: Optional[PaymentInfo] = Field(default=None, alias="paymentInfo")
    paid_at: Optional[datetime] = Field(default=None, alias="paidAt")
    delivered_at: Optional[datetime] = Field(default=None, alias="deliveredAt")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class CreateOrderRequest(RequestModel):
    # Optional so that missing fields are reported with the domain message
    cart: Optional[list[CartItem]] = None
    shipping_address: Optional[dict[str, Any]] = Field(default=None, alias="shippingAddress")
    user: Optional[dict[str, Any]] = None
    total_price: Optional[float] = Field(default=None, alias="totalPrice")
    payment_info: Optional[PaymentInfo] = Field(default=None, alias="paymentInfo")


class UpdateOrderStatusRequest(RequestModel):
    status: str
