"""URL building utilities for URL shortener."""


def normalize_prefix(path_prefix: str) -> str:
    """Return prefix with a leading slash and no trailing slash ('' if empty)."""
    prefix = (path_prefix or "").strip().strip("/")
    return f"/{prefix}" if prefix else ""


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., http://localhost:8080)
        path_prefix: Optional path prefix (e.g., /short)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    return f"{base}{normalize_prefix(path_prefix)}/{short_code}"
