"""Domain layer - error taxonomy shared by the catalog and API layers."""

from catalog_api.domain.exceptions import (
    DomainError,
    InvalidProductIdError,
    ProductError,
    ProductNotFoundError,
    ProductValidationError,
    StoreUnavailableError,
)

__all__ = [
    "DomainError",
    "InvalidProductIdError",
    "ProductError",
    "ProductNotFoundError",
    "ProductValidationError",
    "StoreUnavailableError",
]
