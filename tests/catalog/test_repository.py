"""Tests for catalog repositories against an in-memory SQLite database."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Product
from app.catalog.repository import CategoryRepository, ProductRepository
from app.domain.exceptions import QueryFailedError
from app.infrastructure.database import build_engine

ALL_CODES = [f"PROD00{i}" for i in range(1, 9)]


async def category_id(session: AsyncSession, code: str) -> int:
    """Look up a seeded category id by code."""
    category = await CategoryRepository(session).get_by_code(code)
    assert category is not None
    return category.id


class TestProductRepositoryFindByFilter:
    """Tests for ProductRepository.find_by_filter."""

    async def test_first_page(self, seeded_session: AsyncSession) -> None:
        """Without filters every product matches, in primary-key order."""
        products, total = await ProductRepository(seeded_session).find_by_filter(0, 10)

        assert total == 8
        assert [p.code for p in products] == ALL_CODES

    async def test_total_ignores_pagination(self, seeded_session: AsyncSession) -> None:
        """Total counts all matches regardless of limit and offset."""
        repo = ProductRepository(seeded_session)

        page, total = await repo.find_by_filter(0, 3)
        assert [p.code for p in page] == ALL_CODES[:3]
        assert total == 8

        page, total = await repo.find_by_filter(6, 10)
        assert [p.code for p in page] == ALL_CODES[6:]
        assert total == 8

    async def test_offset_past_end(self, seeded_session: AsyncSession) -> None:
        """An offset beyond the matches returns an empty page."""
        products, total = await ProductRepository(seeded_session).find_by_filter(50, 10)

        assert products == []
        assert total == 8

    async def test_category_filter(self, seeded_session: AsyncSession) -> None:
        """Only products in the category match."""
        clothing_id = await category_id(seeded_session, "clothing")

        products, total = await ProductRepository(seeded_session).find_by_filter(
            0, 10, category_id=clothing_id
        )

        assert [p.code for p in products] == ["PROD001", "PROD004", "PROD008"]
        assert total == 3

    async def test_price_filter_is_strict(self, seeded_session: AsyncSession) -> None:
        """A product priced exactly at the ceiling is excluded."""
        products, total = await ProductRepository(seeded_session).find_by_filter(
            0, 10, price_less_than=Decimal("12.49")
        )

        assert [p.code for p in products] == ["PROD001", "PROD003", "PROD006"]
        assert total == 3

    async def test_filters_are_conjunctive(self, seeded_session: AsyncSession) -> None:
        """Category and price filters both apply."""
        clothing_id = await category_id(seeded_session, "clothing")

        products, total = await ProductRepository(seeded_session).find_by_filter(
            0, 10, category_id=clothing_id, price_less_than=Decimal("30")
        )

        assert [p.code for p in products] == ["PROD001", "PROD008"]
        assert total == 2

    async def test_unknown_category_matches_nothing(self, seeded_session: AsyncSession) -> None:
        """A category without products yields an empty result."""
        products, total = await ProductRepository(seeded_session).find_by_filter(
            0, 10, category_id=9999
        )

        assert products == []
        assert total == 0

    async def test_products_are_hydrated(self, seeded_session: AsyncSession) -> None:
        """Category and variants are loaded with each product."""
        products, _ = await ProductRepository(seeded_session).find_by_filter(0, 1)

        product = products[0]
        assert product.category is not None
        assert product.category.code == "clothing"
        assert [v.sku for v in product.variants] == ["SKU001A", "SKU001B"]
        assert product.variants[1].price == Decimal("0")

    async def test_repeatable_ordering(self, seeded_session: AsyncSession) -> None:
        """Identical queries return identical ordering."""
        repo = ProductRepository(seeded_session)

        first, _ = await repo.find_by_filter(2, 4)
        second, _ = await repo.find_by_filter(2, 4)

        assert [p.id for p in first] == [p.id for p in second]

    async def test_limit_normalized_by_repository(self, seeded_session: AsyncSession) -> None:
        """Repository enforces the page size bounds on its own."""
        seeded_session.add_all(
            Product(code=f"BULK{i:03d}", price=Decimal("1.00")) for i in range(110)
        )
        await seeded_session.commit()
        repo = ProductRepository(seeded_session)

        products, total = await repo.find_by_filter(0, 1000)
        assert len(products) == 100
        assert total == 118

        products, _ = await repo.find_by_filter(0, 0)
        assert len(products) == 10

        products, _ = await repo.find_by_filter(-5, 3)
        assert [p.code for p in products] == ALL_CODES[:3]

    async def test_storage_failure_is_wrapped(self) -> None:
        """Driver errors surface as QueryFailedError."""
        # No tables created
        engine = build_engine("sqlite+aiosqlite:///:memory:")
        try:
            async with AsyncSession(engine) as session:
                with pytest.raises(QueryFailedError) as exc_info:
                    await ProductRepository(session).find_by_filter(0, 10)
        finally:
            await engine.dispose()

        assert "products" in exc_info.value.message
        assert exc_info.value.status_code == 500

    async def test_out_of_range_offset_is_wrapped(self, seeded_session: AsyncSession) -> None:
        """An offset the driver cannot bind surfaces as QueryFailedError."""
        with pytest.raises(QueryFailedError) as exc_info:
            await ProductRepository(seeded_session).find_by_filter(10**20, 10)

        assert exc_info.value.status_code == 500


class TestProductRepositoryLookups:
    """Tests for ProductRepository single-product and full reads."""

    async def test_get_by_code(self, seeded_session: AsyncSession) -> None:
        """Existing products are found with variants."""
        product = await ProductRepository(seeded_session).get_by_code("PROD005")

        assert product is not None
        assert product.price == Decimal("99.99")
        assert product.category is not None
        assert product.category.code == "shoes"
        assert [v.name for v in product.variants] == ["Leather", "Suede"]

    async def test_get_by_code_without_category(self, seeded_session: AsyncSession) -> None:
        """Products without category load with category None."""
        product = await ProductRepository(seeded_session).get_by_code("PROD007")

        assert product is not None
        assert product.category is None

    async def test_get_by_code_missing(self, seeded_session: AsyncSession) -> None:
        """Unknown codes return None."""
        assert await ProductRepository(seeded_session).get_by_code("INVALID") is None

    async def test_find_all(self, seeded_session: AsyncSession) -> None:
        """All products are returned in primary-key order."""
        products = await ProductRepository(seeded_session).find_all()

        assert [p.code for p in products] == ALL_CODES
        assert sum(len(p.variants) for p in products) == 10


class TestCategoryRepository:
    """Tests for CategoryRepository."""

    async def test_list_all_empty(self, session: AsyncSession) -> None:
        """No categories in a fresh database."""
        assert await CategoryRepository(session).list_all() == []

    async def test_create_and_list(self, session: AsyncSession) -> None:
        """Created categories are listed in creation order."""
        repo = CategoryRepository(session)

        created = await repo.create("electronics", "Electronics")
        await repo.create("books", "Books")

        assert created.id is not None
        categories = await repo.list_all()
        assert [(c.code, c.name) for c in categories] == [
            ("electronics", "Electronics"),
            ("books", "Books"),
        ]

    async def test_create_duplicate_code(self, seeded_session: AsyncSession) -> None:
        """Duplicate codes fail as a storage error and leave the session usable."""
        repo = CategoryRepository(seeded_session)

        with pytest.raises(QueryFailedError):
            await repo.create("shoes", "More Shoes")

        assert len(await repo.list_all()) == 3

    async def test_get_by_code(self, seeded_session: AsyncSession) -> None:
        """Categories are found by code."""
        repo = CategoryRepository(seeded_session)

        category = await repo.get_by_code("accessories")
        assert category is not None
        assert category.name == "Accessories"
        assert await repo.get_by_code("garden") is None
