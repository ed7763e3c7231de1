"""Catalog service for product operations.

High-level service that turns raw request parameters into repository
calls. Parameter normalization is deliberately permissive: bad values
fall back to defaults or drop the filter instead of failing the request.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar

import structlog

from app.catalog.models import Category, Product
from app.catalog.repository import (
    DEFAULT_LIMIT,
    CategoryRepository,
    ProductRepository,
    clamp_limit,
)
from app.domain.exceptions import ProductNotFoundError, QueryFailedError, ValidationError
from app.domain.value_objects import Price

T = TypeVar("T")

logger = structlog.get_logger()

# Category ids are stored as unsigned 32-bit values
MAX_CATEGORY_ID = 2**32 - 1

# Offsets and limits are signed 64-bit integers
MIN_INT64 = -(2**63)
MAX_INT64 = 2**63 - 1

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def _parse_int(
    raw: str | None,
    pattern: re.Pattern[str],
    low: int,
    high: int,
) -> int | None:
    """Parse a plain ASCII integer, or None if malformed or out of range."""
    # Longer strings cannot fit in 64 bits
    if raw is None or len(raw) > 20 or not pattern.fullmatch(raw):
        return None
    value = int(raw)
    if not low <= value <= high:
        return None
    return value


@dataclass(frozen=True)
class PaginationParams:
    """Normalized pagination parameters.

    Attributes:
        offset: Number of products to skip (>= 0).
        limit: Page size (1..100).
    """

    offset: int = 0
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(cls, offset: str | None, limit: str | None) -> "PaginationParams":
        """Normalize raw query values.

        Negative or non-numeric offsets become 0. Non-positive or
        non-numeric limits become the default; oversized limits are
        clamped to the maximum.

        Args:
            offset: Raw ``offset`` query value.
            limit: Raw ``limit`` query value.

        Returns:
            Normalized parameters.
        """
        parsed_offset = _parse_int(offset, _SIGNED_INT, MIN_INT64, MAX_INT64)
        if parsed_offset is None or parsed_offset < 0:
            parsed_offset = 0

        parsed_limit = _parse_int(limit, _SIGNED_INT, MIN_INT64, MAX_INT64)
        if parsed_limit is None or parsed_limit <= 0:
            parsed_limit = DEFAULT_LIMIT

        return cls(offset=parsed_offset, limit=clamp_limit(parsed_limit))


@dataclass(frozen=True)
class ProductFilter:
    """Optional listing filters. Both apply when both are set.

    Attributes:
        category_id: Only products in this category.
        price_less_than: Only products strictly cheaper than this.
    """

    category_id: int | None = None
    price_less_than: Decimal | None = None

    @classmethod
    def from_query(
        cls,
        category: str | None,
        price_less_than: str | None,
    ) -> "ProductFilter":
        """Parse raw filter values, silently dropping malformed ones.

        Args:
            category: Raw ``category`` query value (a category id).
            price_less_than: Raw ``price_less_than`` query value.

        Returns:
            Filter with only the parseable values set.
        """
        category_id = _parse_int(category, _UNSIGNED_INT, 0, MAX_CATEGORY_ID)

        ceiling = Price.parse(price_less_than)

        return cls(
            category_id=category_id,
            price_less_than=ceiling.amount if ceiling is not None else None,
        )


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on this page.
        total: Count of all matching items, ignoring pagination.
        offset: Offset the page starts at.
        limit: Page size used.
    """

    items: list[T]
    total: int
    offset: int
    limit: int


class CatalogService:
    """Service for catalog operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(
                ProductRepository(session),
                CategoryRepository(session),
            )
            page = await service.list_products(
                ProductFilter.from_query("1", "20.00"),
                PaginationParams.from_query("0", "10"),
            )
    """

    def __init__(
        self,
        products: ProductRepository,
        categories: CategoryRepository,
    ) -> None:
        """Initialize service with repositories.

        Args:
            products: Product repository.
            categories: Category repository.
        """
        self.products = products
        self.categories = categories

    async def list_products(
        self,
        filters: ProductFilter,
        pagination: PaginationParams,
    ) -> PaginatedResult[Product]:
        """List one page of products.

        Args:
            filters: Filter parameters.
            pagination: Pagination parameters.

        Returns:
            Paginated product results.

        Raises:
            QueryFailedError: If the repository fails.
        """
        products, total = await self.products.find_by_filter(
            pagination.offset,
            pagination.limit,
            filters.category_id,
            filters.price_less_than,
        )
        return PaginatedResult(
            items=list(products),
            total=total,
            offset=pagination.offset,
            limit=pagination.limit,
        )

    async def get_product(self, code: str) -> Product:
        """Get a product by code.

        A failed lookup is reported exactly like a missing product.

        Args:
            code: Product code.

        Returns:
            Hydrated product.

        Raises:
            ProductNotFoundError: If the product is missing or the lookup failed.
        """
        try:
            product = await self.products.get_by_code(code)
        except QueryFailedError as e:
            logger.warning("Product lookup failed", code=code, error=e.message)
            raise ProductNotFoundError(code) from e

        if product is None:
            raise ProductNotFoundError(code)
        return product

    async def list_categories(self) -> list[Category]:
        """List all categories.

        Raises:
            QueryFailedError: If the repository fails.
        """
        return await self.categories.list_all()

    async def create_category(self, code: str, name: str) -> Category:
        """Create a category.

        Args:
            code: Unique category code.
            name: Display name.

        Returns:
            Created category.

        Raises:
            ValidationError: If code or name is blank.
            QueryFailedError: If the insert fails.
        """
        missing = [field for field, value in (("code", code), ("name", name)) if not value]
        if missing:
            raise ValidationError("Code and name are required", fields=missing)
        return await self.categories.create(code, name)
