"""Process-local link store. Contents are lost on restart."""

import logging
import threading
from typing import Dict, Optional
from datetime import datetime, timezone

from .base import LinkStoreBase
from .models import ShortLink


class InMemoryLinkStore(LinkStoreBase):
    """Dictionary-backed link store guarded by a lock."""

    backend_name = "memory"

    def __init__(self, logger: Optional[logging.Logger] = None):
        super().__init__(logger=logger)
        self._links: Dict[str, ShortLink] = {}
        self._lock = threading.Lock()

    async def put(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> bool:
        if created_at is None:
            created_at = datetime.now(timezone.utc)

        link = ShortLink(
            short_code=short_code,
            original_url=original_url,
            created_at=created_at,
        )

        with self._lock:
            if short_code in self._links:
                self.logger.warning(f"Short code already exists: {short_code}")
                return False
            self._links[short_code] = link

        self.logger.debug(f"Stored short URL: {short_code} -> {original_url}")
        return True

    async def get(self, short_code: str) -> Optional[str]:
        with self._lock:
            link = self._links.get(short_code)
        return link.original_url if link else None

    async def get_link(self, short_code: str) -> Optional[ShortLink]:
        with self._lock:
            return self._links.get(short_code)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug(f"In-memory store closed with {len(self)} links")

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)
