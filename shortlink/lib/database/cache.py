"""Redis cache in front of the link store.

Links are immutable, so entries are written once per resolve and left to
expire. Redis being down never fails a request: reads become misses and
writes are dropped.
"""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError


class RedisCache:
    """Read-through cache of short code -> original URL."""

    KEY_PREFIX = "shortlink:code:"

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        logger: Optional[logging.Logger] = None,
    ):
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = bool(redis_url)
        self.client: Optional[redis.Redis] = None

    @property
    def active(self) -> bool:
        return self.enabled and self.client is not None

    def key_for(self, short_code: str) -> str:
        return self.KEY_PREFIX + short_code

    async def connect(self) -> None:
        """Open the client and ping it; an unreachable server disables the cache."""
        if not self.enabled:
            self.logger.info("Redis caching disabled")
            return

        self.client = redis.from_url(self.redis_url, decode_responses=True)
        try:
            await self.client.ping()
        except (RedisError, OSError) as e:
            self.logger.error(f"Redis unreachable, caching disabled: {e}")
            self.enabled = False
            return

        self.logger.info(f"Redis cache connected (ttl={self.ttl_seconds}s)")

    async def get(self, short_code: str) -> Optional[str]:
        if not self.active:
            return None
        try:
            return await self.client.get(self.key_for(short_code))
        except RedisError as e:
            self.logger.warning(f"Cache read failed for {short_code}: {e}")
            return None

    async def set(self, short_code: str, original_url: str) -> bool:
        """Cache a mapping for ``ttl_seconds``. Returns False if not written."""
        if not self.active:
            return False
        try:
            await self.client.setex(self.key_for(short_code), self.ttl_seconds, original_url)
        except RedisError as e:
            self.logger.warning(f"Cache write failed for {short_code}: {e}")
            return False
        return True

    async def ping(self) -> bool:
        if not self.active:
            return False
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.error(f"Cache ping failed: {e}")
            return False

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            self.logger.info("Redis connection closed")
