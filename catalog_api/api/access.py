"""Access demo endpoints.

A public route and a route gated by BearerTokenMiddleware.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Access"])


@router.get("/public", response_class=PlainTextResponse)
async def public_route() -> str:
    return "This is a public route. No authentication required."


@router.get("/protected", response_class=PlainTextResponse)
async def protected_route() -> str:
    return "You have accessed a protected route with a valid Bearer token!"
