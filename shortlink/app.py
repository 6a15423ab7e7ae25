#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests are served by one process on one asyncio event loop
(FastAPI + asyncpg pool + redis.asyncio). The in-memory store is guarded by a
lock; the PostgreSQL store relies on the unique constraint on short_code.

Usage:
    shortlink-server
    python -m shortlink.app

Environment variables:
    STORE_BACKEND - 'memory' (default) or 'postgres'
    DATABASE_URL - PostgreSQL connection URL
    DATABASE_CREATE_TABLES - Set to 1 to create the short_urls table on startup
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .config import Config, load_config
from .lib.database import InMemoryLinkStore, PostgresLinkStore, RedisCache, LinkStoreBase
from .lib.service import URLShortenerService
from .lib.shortcode import ShortCodeGenerator
from .lib.common.logging_config import setup_logging
from .web_app import create_app

# Exit status used by uvicorn when startup fails
STARTUP_FAILURE = 3


def build_store(config: Config, logger: logging.Logger) -> LinkStoreBase:
    """Create the link store selected by STORE_BACKEND."""
    if config.store_backend == "postgres":
        return PostgresLinkStore(
            db_config=config.database_url,
            pool_max_size=config.db_pool_max_size,
            connection_timeout_seconds=config.db_connection_timeout_seconds,
            create_tables=config.database_create_tables,
            logger=logger,
        )
    logger.info("Using in-memory link store (links are lost on restart)")
    return InMemoryLinkStore(logger=logger)


async def build_service(config: Config, logger: logging.Logger) -> URLShortenerService:
    """Create and connect the store, cache and service.

    Raises:
        PersistenceError: If the link store cannot be reached
    """
    store = build_store(config, logger)
    await store.connect()

    cache = None
    if config.redis_url:
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")

    generator = ShortCodeGenerator(
        default_length=config.short_code_length,
        secure=config.secure_codes,
    )
    return URLShortenerService(
        store=store,
        cache=cache,
        short_code_generator=generator,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    # A store that cannot be reached aborts startup
    service = await build_service(config, logger)
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    app = create_app(service_instance=None, config=config, lifespan=lifespan)
    app.state.logger = logger

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        lifespan="on",
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"URL Shortener is running on http://{config.host}:{config.port}")
        server.run()
    except OSError as e:
        logger.error(f"Server failed to start: {e}")
        sys.exit(1)

    if not server.started:
        logger.error("Startup failed, exiting")
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
