"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
Optional response fields default to None and are dropped from the wire
(routes use ``response_model_exclude_none``), so "absent" never shows up
as ``null``.
"""

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error envelope.

    All API errors follow this format for consistency.
    """

    error: str = Field(..., description="Human-readable error message")


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category representation."""

    code: str = Field(..., description="Unique category code")
    name: str = Field(..., description="Category display name")


class CategoryListResponse(BaseModel):
    """Response for category listing."""

    categories: list[CategorySchema] = Field(..., description="All categories")


class CategoryCreateRequest(BaseModel):
    """Request to create a category.

    Missing or null fields decode fine and are reported later as a
    validation error, not as an undecodable body.
    """

    code: str | None = Field(default=None, description="Unique category code")
    name: str | None = Field(default=None, description="Category display name")


# ============================================================================
# Product Schemas
# ============================================================================


class VariantSchema(BaseModel):
    """Variant representation in product details."""

    name: str = Field(..., description="Variant name")
    sku: str = Field(..., description="Stock keeping unit")
    price: float | None = Field(
        default=None,
        description="Effective price; inherited from the product when the variant has none",
    )


class ProductSummarySchema(BaseModel):
    """Product as shown in listings (never includes variants)."""

    code: str = Field(..., description="Unique product code")
    price: float = Field(..., description="Product price")
    category: CategorySchema | None = Field(default=None, description="Product category")


class ProductListResponse(BaseModel):
    """Response for product listing."""

    products: list[ProductSummarySchema] = Field(..., description="Products on this page")
    total: int = Field(..., description="Count of all matching products, ignoring pagination")


class ProductDetailResponse(BaseModel):
    """Full product details including variants."""

    code: str = Field(..., description="Unique product code")
    price: float = Field(..., description="Product price")
    category: CategorySchema | None = Field(default=None, description="Product category")
    variants: list[VariantSchema] = Field(
        default_factory=list, description="Product variants (possibly empty)"
    )
