"""API layer module.

Contains FastAPI routers, middleware and response schemas.
"""

from catalog_api.api.access import router as access_router
from catalog_api.api.cards import router as cards_router
from catalog_api.api.health import router as health_router
from catalog_api.api.products import router as products_router
from catalog_api.api.summary import router as summary_router

__all__ = [
    "access_router",
    "cards_router",
    "health_router",
    "products_router",
    "summary_router",
]
