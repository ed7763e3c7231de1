"""Domain layer - value objects and exceptions.

- **Value Objects**: Immutable objects compared by value (Price)
- **Exceptions**: Catalog errors, each carrying its HTTP status

Example usage:
    from app.domain import Price

    price = Price.parse("10.99")
    price.is_set  # True
"""

# Base classes
from app.domain.base import ValueObject

# Exceptions
from app.domain.exceptions import (
    CatalogError,
    InvalidRequestBodyError,
    ProductNotFoundError,
    QueryFailedError,
    ValidationError,
)

# Value Objects
from app.domain.value_objects import Price

__all__ = [
    # Base
    "ValueObject",
    # Value Objects
    "Price",
    # Exceptions
    "CatalogError",
    "InvalidRequestBodyError",
    "ProductNotFoundError",
    "QueryFailedError",
    "ValidationError",
]
