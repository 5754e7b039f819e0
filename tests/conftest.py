# tests/conftest.py
"""
Shared fixtures and test settings.
"""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

# Environment must be set before the application modules are imported
os.environ.setdefault("JWT_SECRET_KEY", "test_jwt_secret")
os.environ.setdefault("DB_PASSWORD", "test_password")


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def config_path(project_root: Path) -> Path:
    """Path to the configuration file."""
    return project_root / "config" / "config.json"


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Configuration used by loader tests."""
    return {
        "PROJECT_NAME": "eshop_test",
        "VERSION": "1.0.0-test",
        "DEBUG": False,
        "LOG_LEVEL": "INFO",
        "ENVIRONMENT": "test",
        "COMPONENT_MODE": "api",
        "API_HOST": "127.0.0.1",
        "API_PORT": 8100,
        "API_PREFIX": "/api/v2",
        "RELAY_HOST": "127.0.0.1",
        "RELAY_PORT": 4100,
        "CORS_ORIGINS": ["http://localhost:3000"],
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_FORMAT": "colored",
        "LOG_MAX_BYTES": 1024,
        "DB_HOST": "db.test",
        "DB_PORT": 5433,
        "DB_NAME": "eshop_test",
        "DB_USER": "tester",
        "DB_MIN_POOL_SIZE": 1,
        "DB_MAX_POOL_SIZE": 2,
        "DB_COMMAND_TIMEOUT": 5,
        "DB_RETRY_ATTEMPTS": 2,
        "DB_RETRY_DELAY": 0.1,
        "JWT_ALGORITHM": "HS256",
        "JWT_EXPIRES_DAYS": 7,
        "COOKIE_SECURE": False,
        "COOKIE_SAMESITE": "lax",
        "SERVICE_CHARGE_PERCENT": 5.0,
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Writes mock_config to a temporary config.json."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, ensure_ascii=False, indent=2))
    return config_file


# =============================================================================
# INFRASTRUCTURE MOCKS
# =============================================================================

@pytest.fixture
def mock_db() -> AsyncMock:
    """Database manager mock."""
    db = AsyncMock()
    db.fetchrow = AsyncMock(return_value=None)
    db.fetch = AsyncMock(return_value=[])
    db.execute = AsyncMock(return_value="UPDATE 1")
    db.fetchval = AsyncMock(return_value=None)
    return db


# =============================================================================
# SAMPLE ROWS
# =============================================================================

@pytest.fixture
def sample_user_row() -> dict[str, Any]:
    """users row as returned by the repository."""
    return {
        "id": "user-1",
        "name": "Jane Buyer",
        "email": "jane@example.com",
        "phone_number": None,
        "addresses": [],
        "role": "user",
        "avatar": {"public_id": "avatars/1", "url": "https://img.example.com/1.png"},
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def sample_shop_row() -> dict[str, Any]:
    """shops row as returned by the repository."""
    return {
        "id": "shop-1",
        "name": "Gadget Store",
        "email": "shop@example.com",
        "description": "Gadgets",
        "address": "1 Market St",
        "phone_number": "5550100",
        "role": "Seller",
        "avatar": {"public_id": "avatars/s1", "url": "https://img.example.com/s1.png"},
        "zip_code": "10001",
        "withdraw_method": None,
        "available_balance": 0.0,
        "transections": [],
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def sample_product_row() -> dict[str, Any]:
    """products row as returned by the repository."""
    return {
        "id": "prod-1",
        "name": "Phone",
        "description": "A phone",
        "category": "Phones",
        "tags": "mobile",
        "original_price": 120.0,
        "discount_price": 100.0,
        "stock": 10,
        "images": [{"public_id": "p/1", "url": "https://img.example.com/p1.png"}],
        "reviews": [],
        "ratings": None,
        "shop_id": "shop-1",
        "shop": {"_id": "shop-1", "name": "Gadget Store"},
        "sold_out": 0,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def sample_order_row() -> dict[str, Any]:
    """orders row as returned by the repository."""
    return {
        "id": "order-1",
        "cart": [
            {"_id": "prod-1", "shopId": "shop-1", "qty": 2, "name": "Phone", "discountPrice": 50},
        ],
        "shipping_address": {"country": "US", "city": "NYC", "address1": "1 Main St"},
        "buyer": {"_id": "user-1", "name": "Jane Buyer"},
        "shop_id": "shop-1",
        "total_price": 100.0,
        "status": "Processing",
        "payment_info": {"id": "pi_1", "status": "succeeded", "type": "Card"},
        "paid_at": datetime(2024, 1, 2, tzinfo=timezone.utc),
        "delivered_at": None,
        "created_at": datetime(2024, 1, 2, tzinfo=timezone.utc),
    }
