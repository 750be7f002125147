"""Product repositories.

Provides the store interface used by the catalog service, a MongoDB
implementation and an in-memory implementation for development and
tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

import structlog
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from catalog_api.catalog.models import Product, Variant
from catalog_api.domain.exceptions import InvalidProductIdError, StoreUnavailableError
from catalog_api.infrastructure.database import StoreConnection

logger = structlog.get_logger()


def utcnow() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_object_id(product_id: Any) -> ObjectId:
    """Parse a product id.

    Raises:
        InvalidProductIdError: If the id is not a 24-character hex string.
    """
    if isinstance(product_id, ObjectId):
        return product_id
    if not isinstance(product_id, str) or not ObjectId.is_valid(product_id):
        raise InvalidProductIdError(product_id)
    return ObjectId(product_id)


class ProductRepository(ABC):
    """Store interface for Product documents.

    Implementations raise StoreUnavailableError when the backend cannot
    serve a request and InvalidProductIdError for malformed ids. Lookups
    by id return None when nothing matches.
    """

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Get all products in store order."""

    @abstractmethod
    async def find_by_category(self, category: str) -> list[Product]:
        """Get products whose category equals the given value exactly."""

    @abstractmethod
    async def find_by_variant_color(self, color: str) -> list[Product]:
        """Get products with at least one variant of exactly this color."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID."""

    @abstractmethod
    async def insert(self, product: Product) -> Product:
        """Insert a new product, assigning id and timestamps."""

    @abstractmethod
    async def insert_many(self, products: Iterable[Product]) -> list[Product]:
        """Insert products keeping any ids they already carry."""

    @abstractmethod
    async def push_variant(self, product_id: str, variant: Variant) -> Product | None:
        """Append a variant to a product."""

    @abstractmethod
    async def update(self, product_id: str, product: Product) -> Product | None:
        """Replace the mutable fields of a product."""

    @abstractmethod
    async def delete(self, product_id: str) -> Product | None:
        """Delete a product together with its variants."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every product, returning how many were removed."""

    @abstractmethod
    async def count(self) -> int:
        """Count stored products."""

    @abstractmethod
    async def ping(self) -> bool:
        """Check whether the backend answers right now."""


# ============================================================================
# MongoDB
# ============================================================================


def variant_to_document(variant: Variant) -> dict[str, Any]:
    """Convert a variant to its embedded document."""
    variant_id: Any = variant.id
    if ObjectId.is_valid(variant_id):
        variant_id = ObjectId(variant_id)
    return {
        "_id": variant_id,
        "color": variant.color,
        "size": variant.size,
        "stock": variant.stock,
    }


def product_to_document(product: Product) -> dict[str, Any]:
    """Convert a product to a MongoDB document."""
    document: dict[str, Any] = {
        "name": product.name,
        "price": product.price,
        "category": product.category.value,
        "variants": [variant_to_document(v) for v in product.variants],
        "createdAt": product.created_at,
        "updatedAt": product.updated_at,
    }
    if product.id is not None:
        document["_id"] = to_object_id(product.id)
    return document


def document_to_product(document: dict[str, Any]) -> Product:
    """Convert a MongoDB document to a product."""
    return Product(
        id=str(document["_id"]),
        name=document["name"],
        price=document["price"],
        category=document["category"],
        variants=[
            Variant(
                id=str(v["_id"]),
                color=v["color"],
                size=v["size"],
                stock=v["stock"],
            )
            for v in document.get("variants", [])
        ],
        created_at=document.get("createdAt"),
        updated_at=document.get("updatedAt"),
    )


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate driver errors into StoreUnavailableError."""
    try:
        yield
    except PyMongoError as e:
        logger.warning("MongoDB operation failed", operation=operation, error=str(e))
        raise StoreUnavailableError(str(e)) from e


class MongoProductRepository(ProductRepository):
    """Repository for Product documents stored in MongoDB.

    Example usage:
        repo = MongoProductRepository(get_store_connection())
        products = await repo.find_by_category("Electronics")
    """

    def __init__(
        self,
        connection: StoreConnection,
        collection_name: str = "products",
    ) -> None:
        """Initialize repository with a connection handle.

        Args:
            connection: Process-wide MongoDB handle.
            collection_name: Collection holding product documents.
        """
        self.connection = connection
        self.collection_name = collection_name

    @property
    def collection(self) -> AsyncCollection[dict[str, Any]]:
        return self.connection.get_collection(self.collection_name)

    async def _find(self, query: dict[str, Any], operation: str) -> list[Product]:
        with store_errors(operation):
            documents = await self.collection.find(query).to_list()
        return [document_to_product(d) for d in documents]

    async def find_all(self) -> list[Product]:
        return await self._find({}, "find_all")

    async def find_by_category(self, category: str) -> list[Product]:
        return await self._find({"category": category}, "find_by_category")

    async def find_by_variant_color(self, color: str) -> list[Product]:
        return await self._find({"variants.color": color}, "find_by_variant_color")

    async def get_by_id(self, product_id: str) -> Product | None:
        oid = to_object_id(product_id)
        with store_errors("get_by_id"):
            document = await self.collection.find_one({"_id": oid})
        return document_to_product(document) if document else None

    async def insert(self, product: Product) -> Product:
        now = utcnow()
        document = product_to_document(
            product.model_copy(update={"id": None, "created_at": now, "updated_at": now})
        )
        with store_errors("insert"):
            result = await self.collection.insert_one(document)
        return product.model_copy(
            update={"id": str(result.inserted_id), "created_at": now, "updated_at": now}
        )

    async def insert_many(self, products: Iterable[Product]) -> list[Product]:
        now = utcnow()
        stamped = [
            p.model_copy(update={"created_at": now, "updated_at": now}) for p in products
        ]
        if not stamped:
            return []
        documents = [product_to_document(p) for p in stamped]
        with store_errors("insert_many"):
            result = await self.collection.insert_many(documents)
        return [
            p.model_copy(update={"id": str(oid)})
            for p, oid in zip(stamped, result.inserted_ids)
        ]

    async def push_variant(self, product_id: str, variant: Variant) -> Product | None:
        oid = to_object_id(product_id)
        with store_errors("push_variant"):
            document = await self.collection.find_one_and_update(
                {"_id": oid},
                {
                    "$push": {"variants": variant_to_document(variant)},
                    "$set": {"updatedAt": utcnow()},
                },
                return_document=ReturnDocument.AFTER,
            )
        return document_to_product(document) if document else None

    async def update(self, product_id: str, product: Product) -> Product | None:
        oid = to_object_id(product_id)
        fields = product_to_document(product)
        fields.pop("_id", None)
        fields.pop("createdAt", None)
        fields["updatedAt"] = utcnow()
        with store_errors("update"):
            document = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        return document_to_product(document) if document else None

    async def delete(self, product_id: str) -> Product | None:
        oid = to_object_id(product_id)
        with store_errors("delete"):
            document = await self.collection.find_one_and_delete({"_id": oid})
        return document_to_product(document) if document else None

    async def delete_all(self) -> int:
        with store_errors("delete_all"):
            result = await self.collection.delete_many({})
        return result.deleted_count

    async def count(self) -> int:
        with store_errors("count"):
            return await self.collection.count_documents({})

    async def ping(self) -> bool:
        return await self.connection.ping()


# ============================================================================
# In-memory
# ============================================================================


class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository keeping insertion order.

    Setting ``available`` to False makes every call raise
    StoreUnavailableError, which simulates a store outage.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {}
        self.available = True
        for product in products:
            product_id = product.id or str(ObjectId())
            self._products[product_id] = product.model_copy(
                update={"id": product_id}, deep=True
            )

    def _check_available(self) -> None:
        if not self.available:
            raise StoreUnavailableError("in-memory store is marked unavailable")

    def _lookup(self, product_id: str) -> Product | None:
        to_object_id(product_id)
        self._check_available()
        return self._products.get(product_id)

    def _snapshot(self, products: Iterable[Product]) -> list[Product]:
        return [p.model_copy(deep=True) for p in products]

    async def find_all(self) -> list[Product]:
        self._check_available()
        return self._snapshot(self._products.values())

    async def find_by_category(self, category: str) -> list[Product]:
        self._check_available()
        return self._snapshot(
            p for p in self._products.values() if p.category.value == category
        )

    async def find_by_variant_color(self, color: str) -> list[Product]:
        self._check_available()
        return self._snapshot(
            p
            for p in self._products.values()
            if any(v.color == color for v in p.variants)
        )

    async def get_by_id(self, product_id: str) -> Product | None:
        product = self._lookup(product_id)
        return product.model_copy(deep=True) if product else None

    async def insert(self, product: Product) -> Product:
        self._check_available()
        now = utcnow()
        stored = product.model_copy(
            update={"id": str(ObjectId()), "created_at": now, "updated_at": now},
            deep=True,
        )
        self._products[stored.id] = stored
        return stored.model_copy(deep=True)

    async def insert_many(self, products: Iterable[Product]) -> list[Product]:
        self._check_available()
        now = utcnow()
        inserted = []
        for product in products:
            stored = product.model_copy(
                update={
                    "id": product.id or str(ObjectId()),
                    "created_at": now,
                    "updated_at": now,
                },
                deep=True,
            )
            self._products[stored.id] = stored
            inserted.append(stored.model_copy(deep=True))
        return inserted

    async def push_variant(self, product_id: str, variant: Variant) -> Product | None:
        product = self._lookup(product_id)
        if product is None:
            return None
        product.variants.append(variant.model_copy())
        product.updated_at = utcnow()
        return product.model_copy(deep=True)

    async def update(self, product_id: str, product: Product) -> Product | None:
        existing = self._lookup(product_id)
        if existing is None:
            return None
        stored = product.model_copy(
            update={
                "id": product_id,
                "created_at": existing.created_at,
                "updated_at": utcnow(),
            },
            deep=True,
        )
        self._products[product_id] = stored
        return stored.model_copy(deep=True)

    async def delete(self, product_id: str) -> Product | None:
        if self._lookup(product_id) is None:
            return None
        return self._products.pop(product_id)

    async def delete_all(self) -> int:
        self._check_available()
        deleted = len(self._products)
        self._products.clear()
        return deleted

    async def count(self) -> int:
        self._check_available()
        return len(self._products)

    async def ping(self) -> bool:
        return self.available
