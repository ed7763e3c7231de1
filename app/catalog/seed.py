"""Sample catalog data.

A small, fixed catalog used for local development and tests. Some
variants carry a zero price so they inherit their product's price.
"""

from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.catalog.models import Category, Product, ProductVariant

logger = structlog.get_logger()

SAMPLE_CATEGORIES: list[tuple[str, str]] = [
    ("clothing", "Clothing"),
    ("shoes", "Shoes"),
    ("accessories", "Accessories"),
]

# (code, price, category code, [(variant name, sku, variant price)])
SAMPLE_PRODUCTS: list[tuple[str, str, str | None, list[tuple[str, str, str]]]] = [
    ("PROD001", "10.99", "clothing", [
        ("Variant A", "SKU001A", "11.99"),
        ("Variant B", "SKU001B", "0"),
    ]),
    ("PROD002", "12.49", "shoes", [
        ("Size 40", "SKU002A", "0"),
        ("Size 42", "SKU002B", "0"),
    ]),
    ("PROD003", "8.75", "accessories", [
        ("Black", "SKU003A", "9.25"),
    ]),
    ("PROD004", "45.00", "clothing", []),
    ("PROD005", "99.99", "shoes", [
        ("Leather", "SKU005A", "119.99"),
        ("Suede", "SKU005B", "0"),
    ]),
    ("PROD006", "5.50", "accessories", []),
    ("PROD007", "19.99", None, [
        ("One Size", "SKU007A", "0"),
    ]),
    ("PROD008", "25.00", "clothing", [
        ("Small", "SKU008A", "0"),
        ("Large", "SKU008B", "27.50"),
    ]),
]


def build_sample_catalog() -> tuple[list[Category], list[Product]]:
    """Build (unsaved) sample categories and products.

    Returns:
        Tuple of (categories, products).
    """
    categories = {code: Category(code=code, name=name) for code, name in SAMPLE_CATEGORIES}

    products = []
    for code, price, category_code, variants in SAMPLE_PRODUCTS:
        product = Product(
            code=code,
            price=Decimal(price),
            category=categories[category_code] if category_code else None,
        )
        product.variants = [
            ProductVariant(name=name, sku=sku, price=Decimal(variant_price))
            for name, sku, variant_price in variants
        ]
        products.append(product)

    return list(categories.values()), products


async def seed_catalog(session: AsyncSession, clear_existing: bool = True) -> dict[str, Any]:
    """Insert the sample catalog.

    Args:
        session: Session to write with; committed on success.
        clear_existing: Whether to delete existing rows first.

    Returns:
        Seeding result with counts.
    """
    if clear_existing:
        await session.execute(delete(ProductVariant))
        await session.execute(delete(Product))
        await session.execute(delete(Category))

    categories, products = build_sample_catalog()
    session.add_all(categories)
    session.add_all(products)
    await session.commit()

    result = {
        "categories_created": len(categories),
        "products_created": len(products),
        "variants_created": sum(len(p.variants) for p in products),
    }
    logger.info("Sample catalog seeded", **result)
    return result
