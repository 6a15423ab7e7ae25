"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from ...lib.common.url_builder import build_short_url
from ...lib.common.headers import build_base_url
from ...lib.common.validators import is_valid_short_code
from ...lib.shortcode import ShortCodeGenerator
from ...lib.exceptions import ValidationError, PersistenceError, CodeGenerationError

router = APIRouter()

# Short links are served under this fixed prefix: /short/{code}
REDIRECT_PREFIX = "/short"

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


def short_url_for(request: Request, short_code: str) -> str:
    """Public redirect URL for a code, honouring proxy forwarding headers."""
    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=request.app.state.config.base_url,
    )
    return build_short_url(short_code, base_url, path_prefix=REDIRECT_PREFIX)


def _error_page(request: Request, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error_message": message},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the form for submitting a URL."""
    return templates.TemplateResponse(request, "index.html", {})


@router.post("/shorten", response_class=HTMLResponse, include_in_schema=False)
async def shorten_web(request: Request):
    """Handle form submission and render the confirmation page."""
    service = request.app.state.service
    logger = request.app.state.logger

    try:
        form = await request.form()
    except (MultiPartException, StarletteHTTPException) as e:
        logger.info(f"Rejected form submission: {e}")
        return _error_page(request, "Failed to parse form data", status.HTTP_400_BAD_REQUEST)

    url = form.get("url", "")
    if not isinstance(url, str):
        url = ""

    try:
        link = await service.shorten(url)
    except ValidationError as e:
        return _error_page(request, str(e), status.HTTP_400_BAD_REQUEST)
    except PersistenceError as e:
        logger.error(f"Failed to save URL {url}: {e}")
        return _error_page(request, f"Failed to save URL: {e}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    except CodeGenerationError as e:
        return _error_page(request, str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return templates.TemplateResponse(
        request,
        "result.html",
        {
            "original_url": link.original_url,
            "short_url": short_url_for(request, link.short_code),
            "short_code": link.short_code,
        },
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if health["overall"]:
        return {"status": "healthy"}

    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


@router.get(REDIRECT_PREFIX + "/{short_code:path}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect permanently to the original URL."""
    service = request.app.state.service
    logger = request.app.state.logger

    is_valid, error = is_valid_short_code(short_code)
    if not is_valid:
        return _error_page(request, error, status.HTTP_404_NOT_FOUND)

    # Generated codes are base62 only; anything else cannot be stored
    if not ShortCodeGenerator.is_valid_format(short_code):
        return _error_page(request, "Shortened URL not found", status.HTTP_404_NOT_FOUND)

    try:
        original_url = await service.resolve(short_code)
    except PersistenceError as e:
        logger.error(f"Lookup failed for {short_code}: {e}")
        return _error_page(request, f"Database error: {e}", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if original_url is None:
        return _error_page(request, "Shortened URL not found", status.HTTP_404_NOT_FOUND)

    return RedirectResponse(url=original_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
