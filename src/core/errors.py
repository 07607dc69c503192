"""Catalog error types and classification.

Failures around the block catalog fall into two groups: the catalog could
not be fetched at all (network trouble, bad status, unreadable body) or it
was fetched but one of its records is malformed. Neither is retried.

Example:
    from src.core.errors import CatalogFetchError, classify_error

    try:
        blocks = await fetch_blocks(base_url)
    except aiohttp.ClientError as ex:
        raise CatalogFetchError.from_exception(ex) from ex
"""

import asyncio
from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of error types for logging and reporting."""

    NETWORK = auto()  # Connection refused, DNS failure, reset
    TIMEOUT = auto()  # Request did not complete in time
    SERVICE_UNAVAILABLE = auto()  # 5xx from the catalog server
    NOT_FOUND = auto()  # 404 from the catalog server
    INVALID_INPUT = auto()  # Malformed catalog payload or record
    CONFIGURATION = auto()  # Missing catalog file, bad static dir
    UNKNOWN = auto()


class CatalogError(Exception):
    """Base class for block catalog errors.

    Attributes:
        category: The specific type of failure.
        original_error: The underlying exception, if any.
    """

    default_category = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory | None = None,
    ) -> "CatalogError":
        """Create a catalog error wrapping an existing exception."""
        if category is None:
            category = classify_error(ex)
        return cls(message=str(ex), category=category, original_error=ex)


class CatalogFetchError(CatalogError):
    """The catalog could not be retrieved."""

    default_category = ErrorCategory.NETWORK


class CatalogValidationError(CatalogError):
    """A catalog payload or record is malformed."""

    default_category = ErrorCategory.INVALID_INPUT


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into an error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, CatalogError):
        return error.category

    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(error, FileNotFoundError):
        return ErrorCategory.CONFIGURATION

    if isinstance(error, (ValueError, KeyError, TypeError)):
        return ErrorCategory.INVALID_INPUT

    error_str = str(error).lower()

    if "connection" in error_str or "network" in error_str:
        return ErrorCategory.NETWORK

    if "404" in error_str or "not found" in error_str:
        return ErrorCategory.NOT_FOUND

    for code in ("500", "502", "503", "504"):
        if code in error_str:
            return ErrorCategory.SERVICE_UNAVAILABLE
    if "service unavailable" in error_str or "bad gateway" in error_str:
        return ErrorCategory.SERVICE_UNAVAILABLE

    if "invalid" in error_str or "validation" in error_str:
        return ErrorCategory.INVALID_INPUT

    return ErrorCategory.UNKNOWN


def category_for_status(status: int) -> ErrorCategory:
    """Map an HTTP status code from the catalog endpoint to a category."""
    if status == 404:
        return ErrorCategory.NOT_FOUND
    if status >= 500:
        return ErrorCategory.SERVICE_UNAVAILABLE
    return ErrorCategory.INVALID_INPUT
