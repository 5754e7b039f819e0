# tests/services/auth/test_auth_dependencies.py
"""
Tests for the session dependencies.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from eshop.common.exceptions import AppError
from eshop.services.auth.dependencies import (
    AuthContext,
    get_current_seller,
    get_current_user,
    require_admin,
)
from eshop.services.auth.security import create_access_token
from eshop.services.shops.dependencies import get_shop_repository
from eshop.services.users.dependencies import get_user_repository


def _build_app(users: AsyncMock, shops: AsyncMock) -> FastAPI:
    app = FastAPI()

    @app.exception_handler(AppError)
    async def app_error_handler(request, exc: AppError):
        from fastapi.responses import JSONResponse
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.message})

    @app.get("/me")
    async def me(auth: AuthContext = Depends(get_current_user)):
        return {"user_id": auth.user_id, "seller_id": auth.seller_id}

    @app.get("/shop")
    async def shop(auth: AuthContext = Depends(get_current_seller)):
        return {"user_id": auth.user_id, "seller_id": auth.seller_id}

    @app.get("/admin")
    async def admin(auth: AuthContext = Depends(require_admin)):
        return {"user_id": auth.user_id}

    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_shop_repository] = lambda: shops
    return app


@pytest.fixture
def users(sample_user_row) -> AsyncMock:
    repo = AsyncMock()
    repo.get_user_by_id = AsyncMock(return_value=sample_user_row)
    return repo


@pytest.fixture
def shops(sample_shop_row) -> AsyncMock:
    repo = AsyncMock()
    repo.get_shop_by_id = AsyncMock(return_value=sample_shop_row)
    return repo


@pytest.fixture
def client(users: AsyncMock, shops: AsyncMock) -> TestClient:
    return TestClient(_build_app(users, shops))


class TestGetCurrentUser:
    """Tests for get_current_user."""

    def test_cookie(self, client: TestClient, users: AsyncMock) -> None:
        client.cookies.set("token", create_access_token("user-1"))

        response = client.get("/me")

        assert response.status_code == 200
        assert response.json() == {"user_id": "user-1", "seller_id": None}
        users.get_user_by_id.assert_awaited_once_with("user-1")

    def test_bearer_header(self, client: TestClient) -> None:
        token = create_access_token("user-1")

        response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200

    def test_no_token(self, client: TestClient) -> None:
        response = client.get("/me")

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Please login to continue"}

    def test_seller_cookie_is_not_a_user_session(self, client: TestClient) -> None:
        client.cookies.set("seller_token", create_access_token("shop-1"))

        response = client.get("/me")

        assert response.status_code == 401

    def test_invalid_token(self, client: TestClient) -> None:
        client.cookies.set("token", "garbage")

        response = client.get("/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_deleted_user(self, client: TestClient, users: AsyncMock) -> None:
        users.get_user_by_id.return_value = None
        client.cookies.set("token", create_access_token("user-1"))

        response = client.get("/me")

        assert response.status_code == 401
        assert response.json()["error"] == "User doesn't exist"


class TestGetCurrentSeller:
    """Tests for get_current_seller."""

    def test_cookie(self, client: TestClient) -> None:
        client.cookies.set("seller_token", create_access_token("shop-1"))

        response = client.get("/shop")

        assert response.status_code == 200
        assert response.json() == {"user_id": None, "seller_id": "shop-1"}

    def test_unknown_seller(self, client: TestClient, shops: AsyncMock) -> None:
        shops.get_shop_by_id.return_value = None
        client.cookies.set("seller_token", create_access_token("shop-1"))

        response = client.get("/shop")

        assert response.status_code == 404
        assert response.json()["error"] == "Seller not found"


class TestRequireAdmin:
    """Tests for require_admin."""

    def test_plain_user_rejected(self, client: TestClient) -> None:
        client.cookies.set("token", create_access_token("user-1"))

        response = client.get("/admin")

        assert response.status_code == 403
        assert response.json()["error"] == "user can not access this resources!"

    def test_admin_allowed(self, client: TestClient, users: AsyncMock, sample_user_row) -> None:
        users.get_user_by_id.return_value = {**sample_user_row, "role": "Admin"}
        client.cookies.set("token", create_access_token("user-1"))

        response = client.get("/admin")

        assert response.status_code == 200
        assert response.json() == {"user_id": "user-1"}
