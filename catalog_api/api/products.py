"""Product API endpoints.

Provides listing, lookup and write endpoints for the product catalog.
List endpoints fall back to sample data when the store is down.
"""

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Body, Depends, HTTPException, status

from catalog_api.api.schemas import (
    DeleteProductResponse,
    ErrorResponse,
    ProductSchema,
    product_to_schema,
)
from catalog_api.catalog.service import CatalogService, get_catalog_service
from catalog_api.domain.exceptions import (
    DomainError,
    InvalidProductIdError,
    ProductNotFoundError,
    ProductValidationError,
    StoreUnavailableError,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/products", tags=["Products"])

Service = Annotated[CatalogService, Depends(get_catalog_service)]
JsonObject = Annotated[dict[str, Any], Body()]


# ============================================================================
# Error Translation
# ============================================================================


def error_response(
    exc: DomainError,
    store_status: int = status.HTTP_503_SERVICE_UNAVAILABLE,
) -> HTTPException:
    """Map a domain error to an HTTPException with an ``error`` body.

    Args:
        exc: Domain error raised by the catalog service.
        store_status: Status to use when the store is unavailable.

    Returns:
        HTTPException ready to raise.
    """
    if isinstance(exc, ProductNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, StoreUnavailableError):
        status_code = store_status
        logger.error("Product store error", error=exc.message)
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail={"error": exc.message})


CatalogErrors = (
    InvalidProductIdError,
    ProductNotFoundError,
    ProductValidationError,
    StoreUnavailableError,
)


# ============================================================================
# Read Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductSchema],
    summary="List products",
)
async def list_products(service: Service) -> list[ProductSchema]:
    """List all products, or the sample catalog if the store is down."""
    products = await service.list_products()
    return [product_to_schema(p) for p in products]


@router.get(
    "/category/{category}",
    response_model=list[ProductSchema],
    summary="List products by category",
)
async def list_by_category(category: str, service: Service) -> list[ProductSchema]:
    """List products in a category.

    Args:
        category: Category name. Exact match against the store,
            case-insensitive against the sample catalog.
    """
    products = await service.list_by_category(category)
    return [product_to_schema(p) for p in products]


@router.get(
    "/by-color/{color}",
    response_model=list[ProductSchema],
    summary="List products by variant color",
)
async def list_by_color(color: str, service: Service) -> list[ProductSchema]:
    """List products having at least one variant of the given color."""
    products = await service.list_by_color(color)
    return [product_to_schema(p) for p in products]


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Get product",
)
async def get_product(product_id: str, service: Service) -> ProductSchema:
    """Get a product by ID.

    Raises:
        HTTPException: 400 for a malformed id, 404 if not found.
    """
    try:
        product = await service.get_product(product_id)
    except CatalogErrors as e:
        raise error_response(e)
    return product_to_schema(product)


# ============================================================================
# Write Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(payload: JsonObject, service: Service) -> ProductSchema:
    """Create a product with optional variants.

    Args:
        payload: ``{name, price, category, variants?}``.

    Returns:
        Created product with generated id and timestamps.
    """
    try:
        product = await service.create_product(payload)
    except CatalogErrors as e:
        raise error_response(e)
    return product_to_schema(product)


@router.post(
    "/{product_id}/variants",
    response_model=ProductSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Add variant",
)
async def add_variant(
    product_id: str,
    payload: JsonObject,
    service: Service,
) -> ProductSchema:
    """Append a variant to a product.

    Args:
        product_id: Product ID.
        payload: ``{color, size, stock}``; a stock of 0 is valid.

    Returns:
        The updated product.
    """
    try:
        product = await service.add_variant(product_id, payload)
    except CatalogErrors as e:
        raise error_response(e)
    return product_to_schema(product)


@router.put(
    "/{product_id}",
    response_model=ProductSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: str,
    payload: JsonObject,
    service: Service,
) -> ProductSchema:
    """Update a product with a partial or full document.

    Existence is checked before validation, so an unknown id is
    always a 404.
    """
    try:
        product = await service.update_product(product_id, payload)
    except CatalogErrors as e:
        raise error_response(e)
    return product_to_schema(product)


@router.delete(
    "/{product_id}",
    response_model=DeleteProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Delete product",
)
async def delete_product(product_id: str, service: Service) -> DeleteProductResponse:
    """Delete a product and all of its variants.

    Raises:
        HTTPException: 404 if not found, 500 if the store fails.
    """
    try:
        product = await service.delete_product(product_id)
    except CatalogErrors as e:
        raise error_response(e, store_status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return DeleteProductResponse(
        message="Product deleted",
        product=product_to_schema(product),
    )
