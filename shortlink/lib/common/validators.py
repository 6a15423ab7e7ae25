"""Validation utilities for URL shortener."""

from typing import Tuple


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a submitted URL.

    Only presence is checked; the URL is stored as submitted.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    return True, ""


def is_valid_short_code(short_code: str) -> Tuple[bool, str]:
    """Validate a short code taken from a request path.

    Args:
        short_code: The short code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code:
        return False, "Short key is missing"

    if len(short_code) > 32:
        return False, "Short key is too long"

    return True, ""
