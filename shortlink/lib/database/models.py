"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class ShortLink:
    """A stored short code -> URL association. Immutable once created."""

    short_code: str
    original_url: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShortLink":
        """Create from dictionary (or an asyncpg Record)."""
        created_at = data["created_at"]
        if not isinstance(created_at, datetime):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            short_code=data["short_code"],
            original_url=data["original_url"],
            created_at=created_at,
        )
