# eshop/shared/models/__init__.py
"""
DTOs and request models exchanged over the API.
"""

from eshop.shared.models.common import (
    DocumentModel,
    RequestModel,
    ImageDTO,
    ErrorResponse,
    HealthStatus,
)
from eshop.shared.models.order_dto import (
    CartItem,
    PaymentInfo,
    OrderDTO,
    CreateOrderRequest,
    UpdateOrderStatusRequest,
)
from eshop.shared.models.user_dto import UserDTO, AddressDTO
from eshop.shared.models.shop_dto import ShopDTO
from eshop.shared.models.product_dto import ProductDTO, EventDTO, ReviewDTO
from eshop.shared.models.coupon_dto import CouponCodeDTO
from eshop.shared.models.conversation_dto import ConversationDTO, MessageDTO
from eshop.shared.models.withdraw_dto import WithdrawDTO

__all__ = [
    # Common
    "DocumentModel",
    "RequestModel",
    "ImageDTO",
    "ErrorResponse",
    "HealthStatus",
    # Orders
    "CartItem",
    "PaymentInfo",
    "OrderDTO",
    "CreateOrderRequest",
    "UpdateOrderStatusRequest",
    # Accounts
    "UserDTO",
    "AddressDTO",
    "ShopDTO",
    # Catalog
    "ProductDTO",
    "EventDTO",
    "ReviewDTO",
    "CouponCodeDTO",
    # Chat
    "ConversationDTO",
    "MessageDTO",
    # Payouts
    "WithdrawDTO",
]
