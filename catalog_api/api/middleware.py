"""API middleware for the catalog service.

Provides:
- Request ID correlation and request logging
- Bearer token gate for protected paths
- Error handling
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.infrastructure.config import settings

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID for correlation.

    Generates or extracts a request ID and adds it to:
    - Request state for access in handlers
    - Response headers for client correlation
    - Log context for tracing

    Every request is logged on completion with its method, path,
    status code and duration.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round(duration_ms, 2),
            )

            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id

        return response


# ============================================================================
# Bearer Token Middleware
# ============================================================================


# Paths that require a bearer token; everything else is public
PROTECTED_PATHS = {
    "/protected",
}

UNAUTHORIZED_MESSAGE = "Authorization header missing or incorrect"


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """Middleware for bearer token authentication.

    Validates "Authorization: Bearer <token>" on protected paths
    against the configured token. The catalog endpoints are not gated.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Validate bearer token for protected endpoints.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or 401 error.
        """
        path = request.url.path.rstrip("/")
        if path not in PROTECTED_PATHS:
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        scheme, _, token = auth_header.partition(" ")

        if scheme != "Bearer" or token != settings.bearer_token:
            logger.warning(
                "Rejected bearer token",
                path=path,
                method=request.method,
                header_present=bool(auth_header),
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"message": UNAUTHORIZED_MESSAGE},
                headers={"WWW-Authenticate": "Bearer"},
            )

        request.state.authenticated = True

        return await call_next(request)


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware for consistent error handling.

    Catches unhandled exceptions and returns standardized error responses.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Handle errors uniformly.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or error response.
        """
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "An internal error occurred"},
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (innermost - wraps the handlers)
    app.add_middleware(ErrorHandlerMiddleware)

    # Bearer token gate for protected paths
    app.add_middleware(BearerTokenMiddleware)

    # Request ID correlation (outermost - every response gets the header)
    app.add_middleware(RequestIdMiddleware)
