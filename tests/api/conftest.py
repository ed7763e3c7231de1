"""Shared fixtures for API tests.

Handlers get mocked repositories through ``app.dependency_overrides``,
so these tests never touch a database.
"""

from collections.abc import Generator
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_category_repository, get_product_repository
from app.catalog.models import Category, Product, ProductVariant
from app.catalog.repository import CategoryRepository, ProductRepository
from app.main import app


@pytest.fixture
def product_repo() -> AsyncMock:
    """Mocked product repository."""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def category_repo() -> AsyncMock:
    """Mocked category repository."""
    return AsyncMock(spec=CategoryRepository)


@pytest.fixture
def client(
    product_repo: AsyncMock,
    category_repo: AsyncMock,
) -> Generator[TestClient, None, None]:
    """Create test client wired to the mocked repositories."""
    app.dependency_overrides[get_product_repository] = lambda: product_repo
    app.dependency_overrides[get_category_repository] = lambda: category_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def clothing() -> Category:
    """Sample category."""
    return Category(id=1, code="clothing", name="Clothing")


@pytest.fixture
def prod001(clothing: Category) -> Product:
    """Product with one priced and one unpriced variant."""
    product = Product(id=1, code="PROD001", price=Decimal("10.99"), category=clothing)
    product.variants = [
        ProductVariant(id=1, name="Variant A", sku="SKU001A", price=Decimal("11.99")),
        ProductVariant(id=2, name="Variant B", sku="SKU001B", price=Decimal("0")),
    ]
    return product
