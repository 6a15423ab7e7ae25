"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .database.base import LinkStoreBase
from .database.cache import RedisCache
from .database.models import ShortLink
from .common.validators import is_valid_url
from .exceptions import ValidationError, CodeGenerationError


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: LinkStoreBase,
        cache: Optional[RedisCache] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
    ):
        """Initialize URL shortener service.

        Args:
            store: Link store instance
            cache: Optional cache instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Regenerations allowed after a collision
        """
        self.store = store
        self.cache = cache
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries

    async def shorten(self, original_url: str) -> ShortLink:
        """Create a new short URL.

        Shortening the same URL twice yields two independent codes.

        Args:
            original_url: The original long URL

        Returns:
            The stored ShortLink

        Raises:
            ValidationError: If the URL is empty
            CodeGenerationError: If every candidate code collided
            PersistenceError: If the store fails
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise ValidationError(error)

        created_at = datetime.now(timezone.utc)

        for attempt in range(self.max_collision_retries + 1):
            short_code = self.generator.generate_random()

            if await self.store.put(short_code, original_url, created_at):
                break

            self.logger.warning(f"Short code collision on attempt {attempt + 1}: {short_code}")
        else:
            self.logger.error(f"Unable to allocate short code for {original_url}")
            raise CodeGenerationError(
                f"Unable to generate unique short code after {self.max_collision_retries + 1} attempts"
            )

        if self.cache:
            await self.cache.set(short_code, original_url)

        self.logger.info(f"Created short URL: {short_code} -> {original_url}")

        return ShortLink(
            short_code=short_code,
            original_url=original_url,
            created_at=created_at,
        )

    async def resolve(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found

        Raises:
            PersistenceError: If the store fails
        """
        if self.cache:
            cached_url = await self.cache.get(short_code)
            if cached_url:
                self.logger.debug(f"Cache hit for {short_code}")
                return cached_url

        original_url = await self.store.get(short_code)

        if original_url is None:
            self.logger.warning(f"Short code not found: {short_code}")
            return None

        if self.cache:
            await self.cache.set(short_code, original_url)

        self.logger.debug(f"Retrieved URL: {short_code} -> {original_url}")
        return original_url

    async def get_link(self, short_code: str) -> Optional[ShortLink]:
        """Get the complete record for a short code."""
        return await self.store.get_link(short_code)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()
