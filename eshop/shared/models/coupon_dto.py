from datetime import datetime
from typing import Optional

from pydantic import Field

from eshop.shared.models.common import DocumentModel, RequestModel


class CouponCodeDTO(DocumentModel):
    id: str = Field(alias="_id")
    name: str
    value: float
    min_amount: Optional[float] = Field(default=None, alias="minAmount")
    max_amount: Optional[float] = Field(default=None, alias="maxAmount")
    shop_id: str = Field(alias="shopId")
    selected_product: Optional[str] = Field(default=None, alias="selectedProduct")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class CreateCouponRequest(RequestModel):
    name: str
    value: float
    min_amount: Optional[float] = Field(default=None, alias="minAmount")
    max_amount: Optional[float] = Field(default=None, alias="maxAmount")
    shop_id: Optional[str] = Field(default=None, alias="shopId")
    selected_product: Optional[str] = Field(default=None, alias="selectedProduct")
