"""Contract shared by the in-memory and PostgreSQL link stores."""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime

from .models import ShortLink


class LinkStoreBase(ABC):
    """Owns the short code -> URL association.

    Every method raises PersistenceError when the backing storage fails.
    A missing record is never an error: lookups return None instead.
    Records are insert-only; there is no update or delete.
    """

    backend_name = "abstract"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    @abstractmethod
    async def put(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> bool:
        """Insert a mapping; ``created_at`` defaults to now (UTC).

        Returns False, leaving the stored URL untouched, when ``short_code``
        is already taken.
        """

    @abstractmethod
    async def get(self, short_code: str) -> Optional[str]:
        """Exact-match lookup of the original URL."""

    @abstractmethod
    async def get_link(self, short_code: str) -> Optional[ShortLink]:
        """Exact-match lookup of the full record."""

    async def connect(self) -> None:
        """Verify the backend is reachable. No-op by default."""
        return None

    @abstractmethod
    async def health_check(self) -> bool:
        ...

    @abstractmethod
    async def close(self) -> None:
        ...
