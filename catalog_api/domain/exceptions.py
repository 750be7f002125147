"""Domain exceptions.

All catalog errors that represent rule violations or store failures.
Routers translate these into HTTP responses; nothing below the API
layer knows about status codes.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Product Errors
# ============================================================================


class ProductError(DomainError):
    """Base class for product-related errors."""

    pass


class ProductValidationError(ProductError):
    """Raised when client-supplied product data violates a constraint."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        """Initialize product validation error.

        Args:
            message: Message surfaced to the caller as-is.
            errors: Optional per-field error entries.
        """
        super().__init__(message, details={"errors": errors or []})


class ProductNotFoundError(ProductError):
    """Raised when a product id does not resolve."""

    def __init__(self, product_id: str) -> None:
        """Initialize product not found error.

        Args:
            product_id: The id that was looked up.
        """
        super().__init__(
            "Product not found",
            details={"product_id": product_id},
        )


class InvalidProductIdError(ProductError):
    """Raised when a product id is not a valid ObjectId."""

    def __init__(self, product_id: Any) -> None:
        """Initialize invalid product id error.

        Args:
            product_id: The malformed id.
        """
        super().__init__(
            "Invalid product ID",
            details={"product_id": str(product_id)},
        )


# ============================================================================
# Store Errors
# ============================================================================


class StoreUnavailableError(DomainError):
    """Raised when the product store cannot serve a request."""

    def __init__(self, reason: str) -> None:
        """Initialize store unavailable error.

        Args:
            reason: Description of the underlying failure.
        """
        super().__init__(
            f"Product store unavailable: {reason}",
            details={"reason": reason},
        )
