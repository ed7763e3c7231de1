"""Catalog repositories for database operations.

Provides filtered, paginated product queries and category persistence.
Every storage failure is surfaced as a single opaque ``QueryFailedError``.
"""

from decimal import Decimal

import structlog
from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.catalog.models import Category, Product
from app.domain.exceptions import QueryFailedError

logger = structlog.get_logger()

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def clamp_limit(limit: int) -> int:
    """Normalize a page size into ``1..MAX_LIMIT``.

    Args:
        limit: Requested page size.

    Returns:
        ``DEFAULT_LIMIT`` for non-positive values, ``MAX_LIMIT`` for
        values above it, otherwise ``limit`` unchanged.
    """
    if limit <= 0:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


class ProductRepository:
    """Repository for Product database operations.

    Handles filtering, counting and pagination. Returned products always
    have their category and variants loaded.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products, total = await repo.find_by_filter(
                offset=0,
                limit=20,
                price_less_than=Decimal("50"),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_all(self) -> list[Product]:
        """Get every product, hydrated, in primary-key order.

        Returns:
            All products.

        Raises:
            QueryFailedError: If the query fails.
        """
        query = (
            select(Product)
            .options(selectinload(Product.variants), selectinload(Product.category))
            .order_by(Product.id)
        )
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise self._failed("find_all", e) from e
        return list(result.scalars().all())

    async def find_by_filter(
        self,
        offset: int,
        limit: int,
        category_id: int | None = None,
        price_less_than: Decimal | None = None,
    ) -> tuple[list[Product], int]:
        """Find one page of products matching all given filters.

        Args:
            offset: Number of matching products to skip.
            limit: Page size; clamped to ``1..MAX_LIMIT``.
            category_id: Only products in this category.
            price_less_than: Only products strictly cheaper than this.

        Returns:
            Tuple of (page of products, count of all matching products).

        Raises:
            QueryFailedError: If either the count or the page query fails.
        """
        limit = clamp_limit(limit)
        offset = max(offset, 0)

        conditions = []
        if category_id is not None:
            conditions.append(Product.category_id == category_id)
        if price_less_than is not None:
            conditions.append(Product.price < price_less_than)

        count_query = select(func.count(Product.id))
        page_query = (
            select(Product)
            .options(selectinload(Product.variants), selectinload(Product.category))
            .order_by(Product.id)
            .offset(offset)
            .limit(limit)
        )
        if conditions:
            count_query = count_query.where(and_(*conditions))
            page_query = page_query.where(and_(*conditions))

        try:
            total = (await self.session.execute(count_query)).scalar_one()
            result = await self.session.execute(page_query)
            products = list(result.scalars().all())
        except (SQLAlchemyError, OverflowError) as e:
            # Out-of-range bind values raise OverflowError in the driver
            raise self._failed("find_by_filter", e) from e

        logger.debug(
            "Products queried",
            offset=offset,
            limit=limit,
            category_id=category_id,
            price_less_than=str(price_less_than) if price_less_than is not None else None,
            returned=len(products),
            total=total,
        )
        return products, total

    async def get_by_code(self, code: str) -> Product | None:
        """Get product by its unique code.

        Args:
            code: Product code.

        Returns:
            Hydrated product if found, None otherwise.

        Raises:
            QueryFailedError: If the query fails.
        """
        query = (
            select(Product)
            .where(Product.code == code)
            .options(selectinload(Product.variants), selectinload(Product.category))
        )
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise self._failed("get_by_code", e) from e
        return result.scalar_one_or_none()

    @staticmethod
    def _failed(operation: str, error: Exception) -> QueryFailedError:
        logger.error("Product query failed", operation=operation, error=str(error))
        return QueryFailedError(str(error), operation=operation)


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_all(self) -> list[Category]:
        """Get all categories in primary-key order.

        Raises:
            QueryFailedError: If the query fails.
        """
        try:
            result = await self.session.execute(select(Category).order_by(Category.id))
        except SQLAlchemyError as e:
            raise self._failed("list_all", e) from e
        return list(result.scalars().all())

    async def create(self, code: str, name: str) -> Category:
        """Insert and commit a single category.

        Args:
            code: Unique category code.
            name: Display name.

        Returns:
            The persisted category.

        Raises:
            QueryFailedError: If the insert fails (e.g., duplicate code).
        """
        category = Category(code=code, name=name)
        self.session.add(category)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise self._failed("create", e) from e

        logger.info("Category created", category_id=category.id, code=code)
        return category

    async def get_by_code(self, code: str) -> Category | None:
        """Get category by its unique code.

        Args:
            code: Category code.

        Returns:
            Category if found, None otherwise.

        Raises:
            QueryFailedError: If the query fails.
        """
        try:
            result = await self.session.execute(select(Category).where(Category.code == code))
        except SQLAlchemyError as e:
            raise self._failed("get_by_code", e) from e
        return result.scalar_one_or_none()

    @staticmethod
    def _failed(operation: str, error: SQLAlchemyError) -> QueryFailedError:
        logger.error("Category query failed", operation=operation, error=str(error))
        return QueryFailedError(str(error), operation=operation)
