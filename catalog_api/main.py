"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.access import router as access_router
from catalog_api.api.cards import router as cards_router
from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.api.summary import router as summary_router
from catalog_api.catalog.service import get_product_repository
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import close_store_connection

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        store_backend=settings.store_backend,
        debug=settings.debug,
    )

    if await get_product_repository().ping():
        logger.info("Product store connected", store_backend=settings.store_backend)
    else:
        logger.warning(
            "Product store connection failed, list endpoints will serve sample data",
            store_backend=settings.store_backend,
            uri_configured=bool(settings.mongodb_uri),
        )

    yield

    logger.info("Shutting down Catalog API")
    await close_store_connection()


app = FastAPI(
    title="Catalog API",
    description="Product catalog with nested variants and sample-data fallback",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, bearer token gate, error handling)
setup_middleware(app)

# Include routers
app.include_router(summary_router)
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(cards_router)
app.include_router(access_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Render HTTP exceptions.

    Dict details are the response body as-is; anything else becomes
    ``{"error": ...}``.
    """
    detail = exc.detail
    content = detail if isinstance(detail, dict) else {"error": str(detail)}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    """Report malformed request bodies as 400 like other validation errors."""
    messages = [
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    logger.info(
        "Rejected malformed request",
        path=request.url.path,
        method=request.method,
        errors=messages,
    )
    return JSONResponse(status_code=400, content={"error": "; ".join(messages)})

