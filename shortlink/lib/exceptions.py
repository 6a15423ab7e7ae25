"""Exceptions raised by the URL shortener core.

Classes:
    ShortLinkError:
        Base class for all shortener errors.

    ValidationError:
        Raised when a submitted URL is missing or malformed.

    PersistenceError:
        Raised when the link store cannot be reached or a statement fails.

    CodeGenerationError:
        Raised when no free short code was found within the retry budget.
"""


class ShortLinkError(Exception):
    """Base class for URL shortener exceptions."""

    pass


class ValidationError(ShortLinkError, ValueError):
    """Exception raised when user input is rejected."""

    pass


class PersistenceError(ShortLinkError):
    """Exception raised when the link store fails.

    e.g. connection refused, timeouts, failed statements.
    Absence of a record is not an error and is reported as None.
    """

    pass


class CodeGenerationError(ShortLinkError):
    """Exception raised when every generated candidate collided."""

    pass
