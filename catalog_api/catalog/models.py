"""Pydantic models for the product catalog.

Defines Product and Variant documents. Variants are embedded in their
parent product and have no lifecycle of their own.
"""

from datetime import datetime
from enum import Enum

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, Field, field_validator


class Category(str, Enum):
    """Product categories accepted by the catalog."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    FOOTWEAR = "Footwear"
    APPAREL = "Apparel"
    ACCESSORIES = "Accessories"
    HOME = "Home"


def new_object_id() -> str:
    """Generate a fresh ObjectId as a hex string."""
    return str(ObjectId())


class Variant(BaseModel):
    """Color/size/stock combination owned by one product.

    Attributes:
        id: Variant identifier (ObjectId hex string).
        color: Color name.
        size: Size label (e.g., "M", "15-inch").
        stock: Units in stock.
    """

    id: str = Field(
        default_factory=new_object_id,
        validation_alias=AliasChoices("id", "_id"),
    )
    color: str = Field(..., min_length=1)
    size: str = Field(..., min_length=1)
    stock: int = Field(..., ge=0)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not ObjectId.is_valid(v):
            raise ValueError("Invalid variant ID")
        return v


class Product(BaseModel):
    """Product document in the catalog.

    Attributes:
        id: Identifier assigned by the store, None before insertion.
        name: Product name, at least 2 characters.
        price: Price, at least 1. Integers stay integers.
        category: One of the Category values.
        variants: Embedded variants in insertion order.
        created_at: Creation timestamp, set by the store.
        updated_at: Last update timestamp, set by the store.
    """

    id: str | None = None
    name: str = Field(..., min_length=2)
    price: int | float = Field(..., ge=1)
    category: Category
    variants: list[Variant] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_color(self, color: str) -> bool:
        """Check for a variant of the given color, ignoring case."""
        wanted = color.lower()
        return any(v.color.lower() == wanted for v in self.variants)
