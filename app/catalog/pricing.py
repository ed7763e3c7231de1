"""Variant price resolution.

A variant without a price of its own (stored as zero) inherits its
product's price. There is no further fallback level.
"""

from decimal import Decimal

from app.domain.value_objects import Price


def resolve_variant_price(
    variant_price: Price | Decimal,
    product_price: Price | Decimal,
) -> Price:
    """Decide the effective price of a variant.

    Args:
        variant_price: The variant's own price (zero when unset).
        product_price: The owning product's price.

    Returns:
        ``variant_price`` when it is set, otherwise ``product_price``.
    """
    own = variant_price if isinstance(variant_price, Price) else Price.of(variant_price)
    if own.is_set:
        return own
    return product_price if isinstance(product_price, Price) else Price.of(product_price)


def to_wire_price(price: Price) -> float | None:
    """Render a price for the JSON boundary.

    Args:
        price: Resolved price.

    Returns:
        Nearest float, or None when the price is unset.
    """
    if not price.is_set:
        return None
    return price.to_float()
