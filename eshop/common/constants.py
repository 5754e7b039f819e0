# eshop/common/constants.py
"""
Shared constants and enumerations.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Log message types."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class OrderStatus(str, Enum):
    """Order statuses as stored and exchanged with clients."""
    PROCESSING = "Processing"
    TRANSFERRED_TO_DELIVERY_PARTNER = "Transferred to delivery partner"
    DELIVERED = "Delivered"
    REFUND_REQUESTED = "Refund Requested"
    REFUND_SUCCESS = "Refund Success"

    def __str__(self) -> str:
        return self.value


class PaymentStatus(str, Enum):
    """Payment statuses written by the backend."""
    SUCCEEDED = "Succeeded"

    def __str__(self) -> str:
        return self.value


class UserRole(str, Enum):
    """Account roles."""
    USER = "user"
    SELLER = "Seller"
    ADMIN = "Admin"

    def __str__(self) -> str:
        return self.value


class WithdrawStatus(str, Enum):
    """Withdrawal statuses."""
    PROCESSING = "Processing"
    SUCCEED = "succeed"

    def __str__(self) -> str:
        return self.value


class EventStatus(str, Enum):
    """Flash-sale event statuses."""
    RUNNING = "Running"

    def __str__(self) -> str:
        return self.value
