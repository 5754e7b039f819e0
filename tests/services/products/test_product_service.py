# tests/services/products/test_product_service.py
"""
Tests for the product catalog and reviews.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.services.products.repository import ProductRepository
from eshop.services.products.service import ProductService, average_rating
from eshop.shared.models.product_dto import CreateProductRequest, CreateReviewRequest


@pytest.fixture
def repo(sample_product_row: dict[str, Any]) -> AsyncMock:
    repo = AsyncMock()
    repo.create_product = AsyncMock(return_value=sample_product_row)
    repo.get_product_by_id = AsyncMock(return_value=sample_product_row)
    repo.update_reviews = AsyncMock()
    repo.delete_product = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def shops(sample_shop_row: dict[str, Any]) -> AsyncMock:
    shops = AsyncMock()
    shops.get_shop_by_id = AsyncMock(return_value=sample_shop_row)
    return shops


@pytest.fixture
def orders() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(repo, shops, orders) -> ProductService:
    return ProductService(repo, shops, orders)


def _product_request(**overrides: Any) -> CreateProductRequest:
    body = {
        "name": "Phone",
        "description": "A phone",
        "category": "Phones",
        "discountPrice": 100,
        "stock": 10,
        "images": ["https://img.example.com/p1.png"],
        "shopId": "shop-1",
    }
    body.update(overrides)
    return CreateProductRequest.model_validate(body)


class TestAverageRating:
    """Tests for average_rating."""

    def test_mean(self) -> None:
        assert average_rating([{"rating": 4}, {"rating": 5}, {"rating": 3}]) == 4

    def test_ignores_missing_ratings(self) -> None:
        assert average_rating([{"rating": 4}, {"rating": None}, {}]) == 4

    def test_no_ratings(self) -> None:
        assert average_rating([]) is None


class TestCreateProduct:
    """Tests for product creation."""

    @pytest.mark.asyncio
    async def test_embeds_shop_snapshot(self, service: ProductService, repo: AsyncMock) -> None:
        product = await service.create_product(_product_request())

        product_data = repo.create_product.await_args.args[0]
        assert product_data["shop"]["_id"] == "shop-1"
        assert product_data["shop"]["name"] == "Gadget Store"
        assert "password" not in product_data["shop"]
        assert product_data["images"] == [{"public_id": None, "url": "https://img.example.com/p1.png"}]
        assert product.id == "prod-1"

    @pytest.mark.asyncio
    async def test_unknown_shop(self, service: ProductService, shops: AsyncMock, repo: AsyncMock) -> None:
        shops.get_shop_by_id.return_value = None

        with pytest.raises(ValidationError, match="Shop Id is invalid!"):
            await service.create_product(_product_request())

        repo.create_product.assert_not_awaited()

    def test_single_image_is_wrapped(self) -> None:
        request = _product_request(images={"public_id": "p/1", "url": "https://img.example.com/p1.png"})

        assert len(request.images) == 1
        assert request.images[0].public_id == "p/1"


class TestDeleteProduct:
    """Tests for product deletion."""

    @pytest.mark.asyncio
    async def test_missing(self, service: ProductService, repo: AsyncMock) -> None:
        repo.delete_product.return_value = False

        with pytest.raises(NotFoundError) as exc_info:
            await service.delete_product("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Product is not found with this id"


class TestReviews:
    """Tests for create_review."""

    @pytest.mark.asyncio
    async def test_first_review(self, service: ProductService, repo: AsyncMock, orders: AsyncMock) -> None:
        request = CreateReviewRequest.model_validate({
            "user": {"_id": "user-1", "name": "Jane"},
            "rating": 4,
            "comment": "Good",
            "productId": "prod-1",
            "orderId": "order-1",
        })

        await service.create_review("user-1", request)

        product_id, reviews, ratings = repo.update_reviews.await_args.args
        assert product_id == "prod-1"
        assert len(reviews) == 1
        assert ratings == 4
        orders.mark_cart_item_reviewed.assert_awaited_once_with("order-1", "prod-1")

    @pytest.mark.asyncio
    async def test_second_review_from_same_user_replaces(
        self, service: ProductService, repo: AsyncMock, sample_product_row
    ) -> None:
        repo.get_product_by_id.return_value = {
            **sample_product_row,
            "reviews": [
                {"user": {"_id": "user-1"}, "rating": 1, "productId": "prod-1", "createdAt": "2024-01-01"},
                {"user": {"_id": "user-2"}, "rating": 5, "productId": "prod-1"},
            ],
        }
        request = CreateReviewRequest.model_validate({
            "user": {"_id": "user-1"}, "rating": 3, "productId": "prod-1",
        })

        await service.create_review("user-1", request)

        _, reviews, ratings = repo.update_reviews.await_args.args
        assert len(reviews) == 2
        assert reviews[0]["rating"] == 3
        assert reviews[0]["createdAt"] == "2024-01-01"
        assert ratings == 4

    @pytest.mark.asyncio
    async def test_without_order(self, service: ProductService, orders: AsyncMock) -> None:
        request = CreateReviewRequest.model_validate({"user": {"_id": "user-1"}, "rating": 5, "productId": "prod-1"})

        await service.create_review("user-1", request)

        orders.mark_cart_item_reviewed.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_product(self, service: ProductService, repo: AsyncMock) -> None:
        repo.get_product_by_id.return_value = None
        request = CreateReviewRequest.model_validate({"user": {"_id": "user-1"}, "rating": 5, "productId": "nope"})

        with pytest.raises(NotFoundError, match="Product not found with this id"):
            await service.create_review("user-1", request)


class TestAdjustInventory:
    """SQL-level behaviour of ProductRepository.adjust_inventory."""

    @pytest.mark.asyncio
    async def test_single_guarded_update(self, mock_db: AsyncMock) -> None:
        mock_db.execute.return_value = "UPDATE 1"

        changed = await ProductRepository(mock_db).adjust_inventory("prod-1", stock_delta=-2, sold_out_delta=2)

        assert changed is True
        query, product_id, stock_delta, sold_out_delta = mock_db.execute.await_args.args
        assert "sold_out IS NOT NULL" in query
        assert (product_id, stock_delta, sold_out_delta) == ("prod-1", -2, 2)

    @pytest.mark.asyncio
    async def test_untracked_product(self, mock_db: AsyncMock) -> None:
        mock_db.execute.return_value = "UPDATE 0"

        assert await ProductRepository(mock_db).adjust_inventory("prod-1", 1, -1) is False
