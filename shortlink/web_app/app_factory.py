"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .web import web_router
from .middleware import LoggingMiddleware


def create_app(service_instance, config, lifespan=None) -> FastAPI:
    """Build the ASGI app.

    Routes reach their collaborators through ``app.state``: ``service``,
    ``config`` and ``logger``. The server passes ``service_instance=None``
    together with a ``lifespan`` that connects the store and fills in
    ``app.state.service``; tests pass a ready service and no lifespan.
    """
    app = FastAPI(
        title="URL Shortener",
        description="Random short codes for long URLs, with permanent redirects",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logging.getLogger("shortlink")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
