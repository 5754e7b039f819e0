from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from eshop.common.constants import EventStatus
from eshop.shared.models.common import DocumentModel, ImageDTO, RequestModel


class ReviewDTO(DocumentModel):
    user: dict[str, Any]
    rating: Optional[float] = None
    comment: Optional[str] = None
    product_id: str = Field(alias="productId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class ProductDTO(DocumentModel):
    id: str = Field(alias="_id")
    name: str
    description: str
    category: str
    tags: Optional[str] = None
    original_price: Optional[float] = Field(default=None, alias="originalPrice")
    discount_price: float = Field(alias="discountPrice")
    stock: int
    images: list[ImageDTO] = Field(default_factory=list)
    reviews: list[ReviewDTO] = Field(default_factory=list)
    ratings: Optional[float] = None
    shop_id: str = Field(alias="shopId")
    shop: dict[str, Any]
    sold_out: Optional[int] = 0
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


def _wrap_single_image(value: Any) -> Any:
    # A lone image may be sent instead of a list
    if isinstance(value, (str, dict)):
        return [value]
    return value


def _image_from_url(value: Any) -> Any:
    if isinstance(value, str):
        return {"url": value}
    return value


class CreateProductRequest(RequestModel):
    name: str
    description: str
    category: str
    tags: Optional[str] = None
    original_price: Optional[float] = Field(default=None, alias="originalPrice")
    discount_price: float = Field(alias="discountPrice")
    stock: int
    images: list[ImageDTO] = Field(default_factory=list)
    shop_id: str = Field(alias="shopId")

    @field_validator("images", mode="before")
    @classmethod
    def normalize_images(cls, v: Any) -> Any:
        v = _wrap_single_image(v)
        return [_image_from_url(item) for item in v] if isinstance(v, list) else v


class CreateReviewRequest(RequestModel):
    user: dict[str, Any]
    rating: Optional[float] = None
    comment: Optional[str] = None
    product_id: str = Field(alias="productId")
    order_id: Optional[str] = Field(default=None, alias="orderId")


class EventDTO(DocumentModel):
    id: str = Field(alias="_id")
    name: str
    description: str
    category: str
    start_date: datetime = Field(alias="start_Date")
    finish_date: datetime = Field(alias="Finish_Date")
    status: str = EventStatus.RUNNING.value
    tags: Optional[str] = None
    original_price: Optional[float] = Field(default=None, alias="originalPrice")
    discount_price: float = Field(alias="discountPrice")
    stock: int
    images: list[ImageDTO] = Field(default_factory=list)
    shop_id: str = Field(alias="shopId")
    shop: dict[str, Any]
    sold_out: Optional[int] = 0
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class CreateEventRequest(CreateProductRequest):
    start_date: datetime = Field(alias="start_Date")
    finish_date: datetime = Field(alias="Finish_Date")
