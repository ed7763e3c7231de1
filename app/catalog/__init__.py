"""Product Catalog.

Provides catalog models, repositories, price resolution and the
service that normalizes listing parameters.
"""

from app.catalog.models import Category, Product, ProductVariant
from app.catalog.pricing import resolve_variant_price, to_wire_price
from app.catalog.repository import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    CategoryRepository,
    ProductRepository,
)
from app.catalog.service import CatalogService, PaginatedResult, PaginationParams, ProductFilter

__all__ = [
    # Models
    "Category",
    "Product",
    "ProductVariant",
    # Pricing
    "resolve_variant_price",
    "to_wire_price",
    # Repository
    "CategoryRepository",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "ProductRepository",
    # Service
    "CatalogService",
    "PaginatedResult",
    "PaginationParams",
    "ProductFilter",
]
