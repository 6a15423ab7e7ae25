"""JSON API: create links, inspect them, report health."""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request, status

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    LinkInfoResponse,
    HealthResponse,
    ErrorResponse,
)
from ..web.routes import short_url_for
from ...lib.exceptions import ValidationError, PersistenceError, CodeGenerationError

router = APIRouter()


def _status(ok: bool) -> str:
    return "healthy" if ok else "unhealthy"


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty URL"},
        500: {"model": ErrorResponse, "description": "Storage failure or no free code"},
    },
    summary="Create short URL",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Store the URL under a fresh random 6-character code."""
    service = request.app.state.service

    try:
        link = await service.shorten(body.url)
    except ValidationError as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to save URL: {e}")
    except CodeGenerationError as e:
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return ShortenResponse(
        **link.to_dict(),
        short_url=short_url_for(request, link.short_code),
    )


@router.get(
    "/urls/{short_code}",
    response_model=LinkInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Get URL information",
)
async def get_url_info(request: Request, short_code: str):
    try:
        link = await request.app.state.service.get_link(short_code)
    except PersistenceError as e:
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Database error: {e}")

    if link is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail=f"Short code '{short_code}' not found")

    return LinkInfoResponse(**link.to_dict())


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(request: Request):
    """Store and cache status. Always 200; inspect ``status``."""
    service = request.app.state.service
    health = await service.health_check()

    return HealthResponse(
        status=_status(health["overall"]),
        database=_status(health["database"]),
        cache=_status(health["cache"]),
        backend=service.store.backend_name,
        timestamp=datetime.now(timezone.utc),
    )
