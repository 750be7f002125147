"""Catalog service for product operations.

High-level service that combines repository operations with
validation and the sample-data fallback for read paths.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalog_api.catalog.models import Product, Variant
from catalog_api.catalog.repository import (
    InMemoryProductRepository,
    MongoProductRepository,
    ProductRepository,
)
from catalog_api.catalog.samples import SAMPLE_PRODUCTS, SampleCatalog
from catalog_api.domain.exceptions import (
    ProductNotFoundError,
    ProductValidationError,
    StoreUnavailableError,
)
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import get_store_connection

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

logger = structlog.get_logger()

NAME_REQUIRED_MESSAGE = "Name is required and must be at least 2 characters"
PRICE_MINIMUM_MESSAGE = "Price must be at least 1"
CATEGORY_REQUIRED_MESSAGE = "Category is required"
VARIANT_FIELDS_REQUIRED_MESSAGE = "Color, size, and stock are required"

# Client-writable product fields; anything else in a payload is ignored.
PRODUCT_FIELDS = ("name", "price", "category", "variants")


async def with_fallback(
    operation: Awaitable[T],
    fallback: Callable[[], T],
    operation_name: str,
) -> T:
    """Await a store operation, substituting fallback data if the store fails.

    Only StoreUnavailableError is absorbed; every other error propagates.

    Args:
        operation: Pending store call.
        fallback: Produces the substitute result.
        operation_name: Name used in the log event.

    Returns:
        The store result, or the fallback result on store failure.
    """
    try:
        return await operation
    except StoreUnavailableError as e:
        logger.warning(
            "Product store unavailable, serving sample data",
            operation=operation_name,
            error=e.message,
        )
        return fallback()


def format_validation_error(label: str, error: PydanticValidationError) -> str:
    """Render a pydantic error as a single client-facing message."""
    parts = [
        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in error.errors()
    ]
    return f"{label} validation failed: {', '.join(parts)}"


def validate_model(model: type[M], data: dict[str, Any], label: str) -> M:
    """Validate data against a model, raising ProductValidationError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ProductValidationError(
            format_validation_error(label, e),
            errors=[
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ],
        ) from e


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number_text(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class CatalogSummary:
    """Store status for the service root.

    Attributes:
        database_connected: Result of a live ping.
        total_products: Live count, or the sample count when the store
            is empty or unreachable.
    """

    database_connected: bool
    total_products: int


class CatalogService:
    """Service for catalog operations.

    List operations never fail because of the store: on
    StoreUnavailableError they serve the sample catalog instead.
    Single-product operations and writes surface every error.

    Example usage:
        service = CatalogService(InMemoryProductRepository())
        product = await service.create_product(
            {"name": "Desk Lamp", "price": 40, "category": "Home"}
        )
        await service.add_variant(product.id, {"color": "White", "size": "S", "stock": 0})
    """

    def __init__(
        self,
        repository: ProductRepository,
        samples: SampleCatalog | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Product store.
            samples: Fallback source, defaults to the built-in sample set.
        """
        self.repository = repository
        self.samples = samples or SampleCatalog()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_products(self) -> list[Product]:
        return await with_fallback(
            self.repository.find_all(),
            self.samples.all,
            "list_products",
        )

    async def list_by_category(self, category: str) -> list[Product]:
        """List products in a category.

        Matching is exact against the store and case-insensitive
        against the sample catalog.
        """
        return await with_fallback(
            self.repository.find_by_category(category),
            lambda: self.samples.by_category(category),
            "list_by_category",
        )

    async def list_by_color(self, color: str) -> list[Product]:
        """List products having a variant of the given color.

        Matching is exact against the store and case-insensitive
        against the sample catalog.
        """
        return await with_fallback(
            self.repository.find_by_variant_color(color),
            lambda: self.samples.by_color(color),
            "list_by_color",
        )

    async def get_product(self, product_id: str) -> Product:
        """Get product by ID.

        Raises:
            InvalidProductIdError: If the id is malformed.
            ProductNotFoundError: If no product has this id.
        """
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def get_summary(self) -> CatalogSummary:
        connected = await self.repository.ping()
        live_count = await with_fallback(self.repository.count(), lambda: 0, "count")
        return CatalogSummary(
            database_connected=connected,
            total_products=live_count or len(self.samples),
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_product(self, payload: dict[str, Any]) -> Product:
        """Create a product.

        The required fields are checked first so their messages stay
        stable; the full model validation then covers the category
        enumeration and nested variants. A numeric name is stored as
        its text.

        Args:
            payload: Client data with name, price, category and
                optional variants.

        Returns:
            Persisted product with id and timestamps.

        Raises:
            ProductValidationError: If the payload is invalid.
        """
        name = payload.get("name")
        if _is_number(name):
            name = _number_text(name)
        if not isinstance(name, str) or len(name) < 2:
            raise ProductValidationError(NAME_REQUIRED_MESSAGE)

        price = payload.get("price")
        if not price or (_is_number(price) and price < 1):
            raise ProductValidationError(PRICE_MINIMUM_MESSAGE)

        category = payload.get("category")
        if not category:
            raise ProductValidationError(CATEGORY_REQUIRED_MESSAGE)

        product = validate_model(
            Product,
            {
                "name": name,
                "price": price,
                "category": category,
                "variants": payload.get("variants") or [],
            },
            "Product",
        )
        created = await self.repository.insert(product)

        logger.info(
            "Product created",
            product_id=created.id,
            category=created.category.value,
            variant_count=len(created.variants),
        )
        return created

    async def add_variant(self, product_id: str, payload: dict[str, Any]) -> Product:
        """Append a variant to a product.

        A stock of 0 counts as present; only a missing or null stock
        is rejected.

        Raises:
            ProductValidationError: If a field is missing or invalid.
            InvalidProductIdError: If the id is malformed.
            ProductNotFoundError: If the product does not exist.
        """
        color = payload.get("color")
        size = payload.get("size")
        stock = payload.get("stock")
        if not color or not size or stock is None:
            raise ProductValidationError(VARIANT_FIELDS_REQUIRED_MESSAGE)

        variant = validate_model(
            Variant,
            {"color": color, "size": size, "stock": stock},
            "Variant",
        )
        product = await self.repository.push_variant(product_id, variant)
        if product is None:
            raise ProductNotFoundError(product_id)

        logger.info(
            "Variant added",
            product_id=product_id,
            variant_id=variant.id,
            color=variant.color,
            size=variant.size,
        )
        return product

    async def update_product(self, product_id: str, changes: dict[str, Any]) -> Product:
        """Apply a partial or full update to a product.

        Supplied fields replace the stored ones and the merged product
        is validated as a whole before it is written.

        Raises:
            InvalidProductIdError: If the id is malformed.
            ProductNotFoundError: If the product does not exist.
            ProductValidationError: If the merged product is invalid.
        """
        existing = await self.get_product(product_id)

        data = existing.model_dump()
        for field in PRODUCT_FIELDS:
            if field in changes:
                data[field] = changes[field]
        merged = validate_model(Product, data, "Product")

        updated = await self.repository.update(product_id, merged)
        if updated is None:
            raise ProductNotFoundError(product_id)

        logger.info(
            "Product updated",
            product_id=product_id,
            fields=sorted(f for f in PRODUCT_FIELDS if f in changes),
        )
        return updated

    async def delete_product(self, product_id: str) -> Product:
        """Delete a product and its variants.

        Returns:
            The deleted product.

        Raises:
            InvalidProductIdError: If the id is malformed.
            ProductNotFoundError: If the product does not exist.
        """
        product = await self.repository.delete(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        logger.info("Product deleted", product_id=product_id)
        return product

    async def seed_catalog(self, clear_existing: bool = True) -> dict[str, Any]:
        """Load the sample catalog into the store.

        Args:
            clear_existing: Whether to delete existing products first.
                Without it, a non-empty store is left untouched.

        Returns:
            Seeding result with counts.
        """
        deleted = 0
        if clear_existing:
            deleted = await self.repository.delete_all()
        elif await self.repository.count() > 0:
            return {"deleted": 0, "products_created": 0, "variants_created": 0}

        products = await self.repository.insert_many(self.samples.all())

        return {
            "deleted": deleted,
            "products_created": len(products),
            "variants_created": sum(len(p.variants) for p in products),
        }


# ============================================================================
# Singletons
# ============================================================================


_repository: ProductRepository | None = None


def get_product_repository() -> ProductRepository:
    """Get product repository singleton for the configured backend."""
    global _repository
    if _repository is None:
        if settings.store_backend == "memory":
            _repository = InMemoryProductRepository(SAMPLE_PRODUCTS)
        else:
            _repository = MongoProductRepository(
                get_store_connection(),
                collection_name=settings.collection_name,
            )
    return _repository


def reset_product_repository(repository: ProductRepository | None = None) -> None:
    """Reset product repository (for testing)."""
    global _repository
    _repository = repository


def get_catalog_service() -> CatalogService:
    """Get catalog service instance."""
    return CatalogService(get_product_repository())
