"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .exceptions import (
    ShortLinkError,
    ValidationError,
    PersistenceError,
    CodeGenerationError,
)

__all__ = [
    "ShortCodeGenerator",
    "URLShortenerService",
    "ShortLinkError",
    "ValidationError",
    "PersistenceError",
    "CodeGenerationError",
]
