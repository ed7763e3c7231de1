"""Request-scoped dependencies.

Each request gets its own session and repositories; the catalog service
is assembled from them. Tests replace the repository providers through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.repository import CategoryRepository, ProductRepository
from app.catalog.service import CatalogService
from app.infrastructure.database import get_session


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductRepository:
    """Get product repository bound to the request session."""
    return ProductRepository(session)


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryRepository:
    """Get category repository bound to the request session."""
    return CategoryRepository(session)


def get_catalog_service(
    products: Annotated[ProductRepository, Depends(get_product_repository)],
    categories: Annotated[CategoryRepository, Depends(get_category_repository)],
) -> CatalogService:
    """Get catalog service for this request."""
    return CatalogService(products, categories)
