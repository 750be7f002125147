"""Product Catalog Service.

Provides product models, store repositories, the static sample
catalog, and catalog operations with sample-data fallback.
"""

from catalog_api.catalog.models import Category, Product, Variant
from catalog_api.catalog.repository import (
    InMemoryProductRepository,
    MongoProductRepository,
    ProductRepository,
)
from catalog_api.catalog.samples import SAMPLE_PRODUCTS, SampleCatalog
from catalog_api.catalog.service import CatalogService, CatalogSummary, with_fallback

__all__ = [
    # Models
    "Category",
    "Product",
    "Variant",
    # Repository
    "InMemoryProductRepository",
    "MongoProductRepository",
    "ProductRepository",
    # Samples
    "SAMPLE_PRODUCTS",
    "SampleCatalog",
    # Service
    "CatalogService",
    "CatalogSummary",
    "with_fallback",
]
