"""Pytest configuration and fixtures for testing."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from product_api.api.deps import get_product_service
from product_api.main import app
from product_api.models.product import Product
from product_api.repositories.product_repository import ProductRepository
from product_api.services.product_service import ProductService


# Mock database session fixture
@pytest.fixture
def mock_db() -> AsyncMock:
    """Create a mock AsyncSession."""
    db = AsyncMock()

    # Session.add is synchronous on AsyncSession
    db.add = MagicMock()
    db.execute = AsyncMock()
    db.scalar = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.delete = AsyncMock()

    return db


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Return a factory building detached Product instances."""

    def _make(
        product_id: int = 100000,
        name: str = "Widget",
        description: str | None = "A useful widget",
        price: Decimal = Decimal("9.99"),
        stock_available: int = 5,
        category: str = "Tools",
    ) -> Product:
        now = datetime(2025, 9, 14, 8, 0, tzinfo=timezone.utc)
        return Product(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            stock_available=stock_available,
            category=category,
            created_at=now,
            updated_at=now,
        )

    return _make


# Mock product fixture
@pytest.fixture
def product(make_product) -> Product:
    return make_product()


@pytest.fixture
def mock_repository() -> AsyncMock:
    """Create a mock ProductRepository."""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def mock_service() -> AsyncMock:
    """Create a mock ProductService."""
    return AsyncMock(spec=ProductService)


@pytest_asyncio.fixture
async def client(mock_service: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the ASGI app with the product service replaced by a mock."""
    app.dependency_overrides[get_product_service] = lambda: mock_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# Valid creation payload in wire format
@pytest.fixture
def widget_payload() -> dict:
    return {
        "name": "Widget",
        "description": "A useful widget",
        "price": 9.99,
        "stockAvailable": 5,
        "category": "Tools",
    }
