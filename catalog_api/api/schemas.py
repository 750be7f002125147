"""API schemas for the catalog service.

Pydantic models for response serialization. Catalog request bodies are
validated by the catalog service so that every violation surfaces as a
400 with a readable message.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog_api.catalog.models import Category, Product


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error response for catalog endpoints."""

    error: str = Field(..., description="Human-readable error message")


class MessageResponse(BaseModel):
    """Plain message response used by the cards and access demo endpoints."""

    message: str = Field(..., description="Human-readable message")


# ============================================================================
# Product Schemas
# ============================================================================


class VariantSchema(BaseModel):
    """A variant embedded in a product."""

    id: str = Field(..., description="Variant identifier")
    color: str = Field(..., description="Color name")
    size: str = Field(..., description="Size label")
    stock: int = Field(..., ge=0, description="Units in stock")


class ProductSchema(BaseModel):
    """Product as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    price: int | float = Field(..., description="Product price")
    category: Category = Field(..., description="Product category")
    variants: list[VariantSchema] = Field(
        default_factory=list, description="Variants in insertion order"
    )
    created_at: datetime | None = Field(
        default=None, alias="createdAt", description="When the product was created"
    )
    updated_at: datetime | None = Field(
        default=None, alias="updatedAt", description="When the product was last updated"
    )


class DeleteProductResponse(BaseModel):
    """Confirmation of a product deletion."""

    message: str = Field(..., description="Confirmation message")
    product: ProductSchema = Field(..., description="The deleted product")


class CatalogSummaryResponse(BaseModel):
    """Service status shown at the root path."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    status: str
    database: str = Field(..., description="Connected or Disconnected")
    total_products: int = Field(..., alias="totalProducts")
    featured_endpoints: dict[str, str] = Field(..., alias="featuredEndpoints")
    example_payload: dict[str, Any] = Field(..., alias="examplePayload")


def product_to_schema(product: Product) -> ProductSchema:
    """Convert Product model to response schema."""
    return ProductSchema(
        id=product.id,
        name=product.name,
        price=product.price,
        category=product.category,
        variants=[
            VariantSchema(id=v.id, color=v.color, size=v.size, stock=v.stock)
            for v in product.variants
        ],
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


# ============================================================================
# Card Schemas
# ============================================================================


class CardSchema(BaseModel):
    """A playing card."""

    id: int = Field(..., description="Card identifier")
    suit: str = Field(..., description="Card suit")
    value: str = Field(..., description="Card value")


class CardCreateRequest(BaseModel):
    """Request to add a card.

    Both fields are optional here so that a missing one is reported
    with the API's own 400 message rather than a schema error.
    """

    suit: str | None = Field(default=None, description="Card suit")
    value: str | None = Field(default=None, description="Card value")
