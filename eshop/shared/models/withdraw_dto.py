from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from eshop.common.constants import WithdrawStatus
from eshop.shared.models.common import DocumentModel, RequestModel


class WithdrawDTO(DocumentModel):
    id: str = Field(alias="_id")
    seller: dict[str, Any]
    amount: float
    status: str = WithdrawStatus.PROCESSING.value
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class CreateWithdrawRequest(RequestModel):
    amount: float = Field(gt=0)


class UpdateWithdrawRequest(RequestModel):
    seller_id: str = Field(alias="sellerId")
