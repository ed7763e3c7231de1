"""Domain exceptions.

All catalog-level errors. The API layer maps each of these onto an HTTP
status code and a ``{"error": message}`` envelope.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    Attributes:
        message: Human-readable message, rendered verbatim in the envelope.
        details: Extra context for logs (never sent to clients).
        status_code: HTTP status the API layer responds with.
    """

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Request Errors
# ============================================================================


class InvalidRequestBodyError(CatalogError):
    """Raised when a request body is not decodable into the expected shape."""

    status_code = 400

    def __init__(self, reason: str | None = None) -> None:
        """Initialize invalid request body error.

        Args:
            reason: Decoder message, kept for logging only.
        """
        super().__init__(
            "Invalid request body",
            details={"reason": reason} if reason else None,
        )


class ValidationError(CatalogError):
    """Raised when required request fields are missing or blank."""

    status_code = 400

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Message returned to the client.
            fields: Names of the offending fields.
        """
        super().__init__(message, details={"fields": fields or []})


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(CatalogError):
    """Raised when no product matches the requested code."""

    status_code = 404

    def __init__(self, code: str) -> None:
        """Initialize product not found error.

        Args:
            code: Requested product code.
        """
        super().__init__("Product not found", details={"code": code})


# ============================================================================
# Storage Errors
# ============================================================================


class QueryFailedError(CatalogError):
    """Raised when the underlying store fails for any reason.

    Storage failures are opaque: callers get the driver message and
    nothing finer-grained.
    """

    status_code = 500

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize query failed error.

        Args:
            message: Message from the storage layer.
            operation: Repository operation that failed.
        """
        super().__init__(
            message,
            details={"operation": operation} if operation else None,
        )
