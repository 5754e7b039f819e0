# tests/services/orders/test_order_routes.py
"""
HTTP tests for the order endpoints.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from eshop.common.exceptions import NotFoundError, ValidationError
from eshop.services.api.app import app
from eshop.services.auth.dependencies import AuthContext, get_current_seller, require_admin
from eshop.services.orders.dependencies import get_order_service
from eshop.shared.models.order_dto import OrderDTO
from eshop.shared.models.shop_dto import ShopDTO
from eshop.shared.models.user_dto import UserDTO

PREFIX = "/api/v2/order"


@pytest.fixture
def order_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(order_service: AsyncMock, sample_shop_row, sample_user_row):
    seller = AuthContext(seller=ShopDTO.model_validate(sample_shop_row))
    admin = AuthContext(user=UserDTO.model_validate({**sample_user_row, "role": "Admin"}))

    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_current_seller] = lambda: seller
    app.dependency_overrides[require_admin] = lambda: admin
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def order(sample_order_row: dict[str, Any]) -> OrderDTO:
    return OrderDTO.model_validate(sample_order_row)


class TestCreateOrder:
    """POST /order/create-order"""

    def test_created(self, client: TestClient, order_service: AsyncMock, order: OrderDTO) -> None:
        order_service.create_orders.return_value = [order]

        response = client.post(
            f"{PREFIX}/create-order",
            json={
                "cart": [{"_id": "prod-1", "shopId": "shop-1", "qty": 2}],
                "shippingAddress": {"city": "NYC"},
                "user": {"_id": "user-1"},
                "totalPrice": 100,
                "paymentInfo": {"id": "pi_1", "status": "succeeded", "type": "Card"},
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["orders"][0]["_id"] == "order-1"
        assert body["orders"][0]["shopId"] == "shop-1"
        assert body["orders"][0]["totalPrice"] == 100
        assert body["orders"][0]["cart"][0]["qty"] == 2

    def test_missing_fields(self, client: TestClient, order_service: AsyncMock) -> None:
        order_service.create_orders.side_effect = ValidationError("Missing required fields")

        response = client.post(f"{PREFIX}/create-order", json={})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Missing required fields"}


class TestOrderListings:
    """GET listings"""

    def test_user_orders(self, client: TestClient, order_service: AsyncMock, order: OrderDTO) -> None:
        order_service.get_user_orders.return_value = [order]

        response = client.get(f"{PREFIX}/get-all-orders/user-1")

        assert response.status_code == 200
        order_service.get_user_orders.assert_awaited_once_with("user-1")
        assert len(response.json()["orders"]) == 1

    def test_seller_orders(self, client: TestClient, order_service: AsyncMock) -> None:
        order_service.get_shop_orders.return_value = []

        response = client.get(f"{PREFIX}/get-seller-all-orders/shop-1")

        assert response.status_code == 200
        assert response.json() == {"success": True, "orders": []}

    def test_admin_orders(self, client: TestClient, order_service: AsyncMock) -> None:
        order_service.get_all_orders.return_value = []

        response = client.get(f"{PREFIX}/admin-all-orders")

        assert response.status_code == 201
        assert response.json()["success"] is True


class TestStatusUpdates:
    """PUT status changes"""

    def test_update_status_uses_authenticated_seller(
        self, client: TestClient, order_service: AsyncMock, order: OrderDTO
    ) -> None:
        order_service.update_order_status.return_value = order

        response = client.put(f"{PREFIX}/update-order-status/order-1", json={"status": "Delivered"})

        assert response.status_code == 200
        order_service.update_order_status.assert_awaited_once_with("order-1", "Delivered", "shop-1")
        assert response.json()["order"]["_id"] == "order-1"

    def test_update_unknown_order(self, client: TestClient, order_service: AsyncMock) -> None:
        order_service.update_order_status.side_effect = NotFoundError("Order not found with this id")

        response = client.put(f"{PREFIX}/update-order-status/missing", json={"status": "Delivered"})

        assert response.status_code == 400
        assert response.json()["error"] == "Order not found with this id"

    def test_refund_request(self, client: TestClient, order_service: AsyncMock, order: OrderDTO) -> None:
        order_service.request_refund.return_value = order

        response = client.put(f"{PREFIX}/order-refund/order-1", json={"status": "Refund Requested"})

        assert response.status_code == 200
        assert response.json()["message"] == "Order Refund Request successfully!"

    def test_refund_success(self, client: TestClient, order_service: AsyncMock, order: OrderDTO) -> None:
        order_service.accept_refund.return_value = order

        response = client.put(f"{PREFIX}/order-refund-success/order-1", json={"status": "Refund Success"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Order Refund successful!"}
        order_service.accept_refund.assert_awaited_once_with("order-1", "Refund Success")

    def test_status_body_required(self, client: TestClient) -> None:
        response = client.put(f"{PREFIX}/update-order-status/order-1", json={})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestSellerGate:
    """Seller-only endpoints without a seller session"""

    def test_requires_login(self, order_service: AsyncMock) -> None:
        app.dependency_overrides[get_order_service] = lambda: order_service
        try:
            response = TestClient(app).put(
                f"{PREFIX}/update-order-status/order-1", json={"status": "Delivered"}
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Please login to continue"}
        order_service.update_order_status.assert_not_awaited()
