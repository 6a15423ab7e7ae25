"""Request and response bodies of the JSON API."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Status = Literal["healthy", "unhealthy"]


class ShortenRequest(BaseModel):
    url: str = Field(..., description="URL to shorten; any non-empty string is accepted")

    model_config = {
        "json_schema_extra": {
            "examples": [{"url": "https://example.com/very/long/path/to/resource"}]
        }
    }


class LinkInfoResponse(BaseModel):
    """A stored link."""

    short_code: str = Field(..., description="6-character base62 code")
    original_url: str
    created_at: datetime


class ShortenResponse(LinkInfoResponse):
    """A newly stored link plus its public URL."""

    short_url: str = Field(..., description="Redirect URL, e.g. http://localhost:8080/short/aB3xYz")


class HealthResponse(BaseModel):
    status: Status
    database: Status
    cache: Status
    backend: str = Field(..., description="'memory' or 'postgres'")
    timestamp: datetime


class ErrorResponse(BaseModel):
    detail: Optional[str] = None
