"""Shared test fixtures"""
import os

os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from app.models.product import Product, ProductType, utc_now
from app.repositories.product import ProductRepository
from app.services.notifications import NotificationPort


@pytest.fixture
def mock_collection():
    """Mock MongoDB collection for testing"""
    return AsyncMock()


@pytest.fixture
def product_repository():
    """Mock persistence port"""
    repo = AsyncMock(spec=ProductRepository)
    repo.update.return_value = True
    return repo


@pytest.fixture
def notifications():
    """Mock notification port"""
    return Mock(spec=NotificationPort)


@pytest.fixture
def make_product():
    """Factory for products whose dates bracket the current time"""
    def _make(**overrides):
        now = utc_now()
        data = {
            "id": 1,
            "name": "Sample Product",
            "type": ProductType.NORMAL,
            "available": 10,
            "lead_time": 5,
            "season_start_date": now - timedelta(days=1),
            "season_end_date": now + timedelta(days=30),
            "expiry_date": now + timedelta(days=1),
            "flash_sale_start_date": now - timedelta(days=1),
            "flash_sale_end_date": now + timedelta(days=1),
        }
        data.update(overrides)
        return Product(**data)
    return _make
