"""Service root endpoint.

Reports that the service is running, the live store state and the
number of products a client can expect to see.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalog_api.api.schemas import CatalogSummaryResponse
from catalog_api.catalog.service import CatalogService, get_catalog_service

router = APIRouter(tags=["Summary"])

FEATURED_ENDPOINTS = {
    "GET /products": "Get all products",
    "GET /products/category/Electronics": "Get products by category",
    "GET /products/by-color/Blue": "Get products by color variant",
    "POST /products": "Create new product",
    "POST /products/:id/variants": "Add variant to product",
}

EXAMPLE_PAYLOAD = {
    "createProduct": {
        "name": "Product Name",
        "price": 100,
        "category": "Electronics",
        "variants": [{"color": "Black", "size": "M", "stock": 10}],
    },
    "addVariant": {"color": "Red", "size": "L", "stock": 5},
}


@router.get("/", response_model=CatalogSummaryResponse)
async def catalog_summary(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> CatalogSummaryResponse:
    """Get service status.

    ``totalProducts`` is the live count, or the sample catalog size when
    the store is empty or unreachable.
    """
    summary = await service.get_summary()
    return CatalogSummaryResponse(
        message="E-commerce Catalog System is running!",
        status="Server is active",
        database="Connected" if summary.database_connected else "Disconnected",
        total_products=summary.total_products,
        featured_endpoints=FEATURED_ENDPOINTS,
        example_payload=EXAMPLE_PAYLOAD,
    )
