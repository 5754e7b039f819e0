from datetime import datetime, timezone
from typing import Any, Optional

from eshop.common.constants import TypeMsg
from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.common.logger import log_info
from eshop.services.orders.repository import OrderRepository
from eshop.services.products.repository import ProductRepository
from eshop.services.shops.repository import ShopRepository
from eshop.shared.models.product_dto import CreateProductRequest, CreateReviewRequest, ProductDTO
from eshop.shared.models.shop_dto import ShopDTO


def average_rating(reviews: list[dict[str, Any]]) -> Optional[float]:
    """Mean of the numeric review ratings, None when there are none."""
    ratings = [r["rating"] for r in reviews if isinstance(r.get("rating"), (int, float))]
    if not ratings:
        return None
    return sum(ratings) / len(ratings)


class ProductService:
    def __init__(self, repository: ProductRepository, shops: ShopRepository, orders: OrderRepository):
        self.repository = repository
        self.shops = shops
        self.orders = orders

    async def shop_snapshot(self, shop_id: str) -> dict[str, Any]:
        """Public view of the shop embedded into a catalog item."""
        shop = await self.shops.get_shop_by_id(shop_id)
        if not shop:
            raise ValidationError("Shop Id is invalid!")
        return ShopDTO.model_validate(shop).model_dump(by_alias=True, mode="json")

    async def create_product(self, request: CreateProductRequest) -> ProductDTO:
        product_data = request.model_dump()
        product_data["shop"] = await self.shop_snapshot(request.shop_id)
        product_data["images"] = [image.model_dump() for image in request.images]

        row = await self.repository.create_product(product_data)
        product = ProductDTO.model_validate(row)
        await log_info(f"Product created: {product.id} (shop {product.shop_id})", type_msg=TypeMsg.INFO)
        return product

    async def get_shop_products(self, shop_id: str) -> list[ProductDTO]:
        rows = await self.repository.get_products_by_shop(shop_id)
        return [ProductDTO.model_validate(row) for row in rows]

    async def get_all_products(self) -> list[ProductDTO]:
        rows = await self.repository.get_all_products()
        return [ProductDTO.model_validate(row) for row in rows]

    async def delete_product(self, product_id: str) -> None:
        if not await self.repository.delete_product(product_id):
            raise NotFoundError("Product is not found with this id", status_code=404)
        await log_info(f"Product deleted: {product_id}", type_msg=TypeMsg.INFO)

    async def create_review(self, reviewer_id: Optional[str], request: CreateReviewRequest) -> None:
        """
        Adds the reviewer's review or replaces their previous one, recomputes
        the product rating and flags the reviewed line of the order.
        """
        product = await self.repository.get_product_by_id(request.product_id)
        if not product:
            raise NotFoundError("Product not found with this id", status_code=404)

        review = {
            "user": request.user,
            "rating": request.rating,
            "comment": request.comment,
            "productId": request.product_id,
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }

        reviews = list(product.get("reviews") or [])
        for index, existing in enumerate(reviews):
            if reviewer_id and (existing.get("user") or {}).get("_id") == reviewer_id:
                reviews[index] = {**existing, **review, "createdAt": existing.get("createdAt", review["createdAt"])}
                break
        else:
            reviews.append(review)

        await self.repository.update_reviews(request.product_id, reviews, average_rating(reviews))

        if request.order_id:
            await self.orders.mark_cart_item_reviewed(request.order_id, request.product_id)
