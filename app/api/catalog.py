"""Catalog API endpoints.

Provides:
- GET /catalog - paginated, filterable product listing
- GET /catalog/{code} - product details with variants
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query

from app.api.categories import category_to_schema
from app.api.dependencies import get_catalog_service
from app.api.schemas import (
    ErrorResponse,
    ProductDetailResponse,
    ProductListResponse,
    ProductSummarySchema,
    VariantSchema,
)
from app.catalog.models import Product, ProductVariant
from app.catalog.pricing import resolve_variant_price, to_wire_price
from app.catalog.service import CatalogService, PaginationParams, ProductFilter

logger = structlog.get_logger()

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ============================================================================
# Converters
# ============================================================================


def product_to_summary(product: Product) -> ProductSummarySchema:
    """Convert Product to its listing shape (no variants)."""
    return ProductSummarySchema(
        code=product.code,
        price=product.price_value.to_float(),
        category=category_to_schema(product.category) if product.category else None,
    )


def variant_to_schema(variant: ProductVariant, product: Product) -> VariantSchema:
    """Convert a variant, resolving its price against the product's."""
    price = resolve_variant_price(variant.price_value, product.price_value)
    return VariantSchema(
        name=variant.name,
        sku=variant.sku,
        price=to_wire_price(price),
    )


def product_to_detail(product: Product) -> ProductDetailResponse:
    """Convert Product to its detail shape (always with a variants list)."""
    return ProductDetailResponse(
        code=product.code,
        price=product.price_value.to_float(),
        category=category_to_schema(product.category) if product.category else None,
        variants=[variant_to_schema(v, product) for v in product.variants],
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
    description="List products with pagination and optional category and price filters.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    offset: Annotated[str | None, Query(description="Products to skip")] = None,
    limit: Annotated[str | None, Query(description="Page size (default 10, max 100)")] = None,
    category: Annotated[str | None, Query(description="Category id filter")] = None,
    price_less_than: Annotated[
        str | None, Query(description="Only products strictly cheaper than this")
    ] = None,
) -> ProductListResponse:
    """List products.

    Malformed parameters never fail the request: pagination falls back
    to defaults and unparseable filters are ignored.

    Args:
        service: Catalog service.
        offset: Raw offset.
        limit: Raw limit.
        category: Raw category id.
        price_less_than: Raw price ceiling.

    Returns:
        Products on the requested page and the total match count.

    Raises:
        QueryFailedError: If the store fails (rendered as 500).
    """
    pagination = PaginationParams.from_query(offset, limit)
    filters = ProductFilter.from_query(category, price_less_than)

    page = await service.list_products(filters, pagination)

    logger.info(
        "Products listed",
        offset=pagination.offset,
        limit=pagination.limit,
        category_id=filters.category_id,
        returned=len(page.items),
        total=page.total,
    )

    return ProductListResponse(
        products=[product_to_summary(p) for p in page.items],
        total=page.total,
    )


@router.get(
    "/{code}",
    response_model=ProductDetailResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
    summary="Get product details",
    description="Get a product by code, including its variants with resolved prices.",
)
async def get_product(
    code: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductDetailResponse:
    """Get a product by code.

    Args:
        code: Product code.
        service: Catalog service.

    Returns:
        Product details.

    Raises:
        ProductNotFoundError: If the product is missing or the lookup failed.
    """
    product = await service.get_product(code)
    return product_to_detail(product)
