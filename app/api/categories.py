"""Category API endpoints.

Provides:
- GET /categories - list categories
- POST /categories - create a category
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.api.dependencies import get_catalog_service
from app.api.schemas import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategorySchema,
    ErrorResponse,
)
from app.catalog.models import Category
from app.catalog.service import CatalogService
from app.domain.exceptions import InvalidRequestBodyError

logger = structlog.get_logger()

router = APIRouter(prefix="/categories", tags=["Categories"])

# A JSON null body decodes to an empty request
_create_body = TypeAdapter(CategoryCreateRequest | None)


# ============================================================================
# Converters
# ============================================================================


def category_to_schema(category: Category) -> CategorySchema:
    """Convert Category to response schema."""
    return CategorySchema(code=category.code, name=category.name)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CategoryListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
)
async def list_categories(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CategoryListResponse:
    """List all categories."""
    categories = await service.list_categories()
    return CategoryListResponse(categories=[category_to_schema(c) for c in categories])


@router.post(
    "",
    response_model=CategorySchema,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create category",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CategoryCreateRequest.model_json_schema()}
            },
        }
    },
)
async def create_category(
    request: Request,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CategorySchema:
    """Create a category.

    The body is decoded by hand so that an undecodable body and a
    missing field produce different errors.

    Args:
        request: The incoming request.
        service: Catalog service.

    Returns:
        The created category.

    Raises:
        InvalidRequestBodyError: If the body is not a JSON object of strings.
        ValidationError: If code or name is missing or empty.
        QueryFailedError: If the insert fails.
    """
    body = await request.body()
    try:
        payload = _create_body.validate_json(body) or CategoryCreateRequest()
    except PydanticValidationError as e:
        logger.warning("Undecodable category body", error_count=e.error_count())
        raise InvalidRequestBodyError(str(e)) from e

    category = await service.create_category(payload.code or "", payload.name or "")
    return category_to_schema(category)
