"""Tests for catalog error types and classification."""

import asyncio

from src.core.errors import (
    CatalogError,
    CatalogFetchError,
    CatalogValidationError,
    ErrorCategory,
    category_for_status,
    classify_error,
)


class TestCatalogErrors:
    """Tests for the catalog exception hierarchy."""

    def test_fetch_error_defaults_to_network(self) -> None:
        error = CatalogFetchError("boom")
        assert error.category == ErrorCategory.NETWORK
        assert error.original_error is None
        assert str(error) == "boom"

    def test_validation_error_defaults_to_invalid_input(self) -> None:
        error = CatalogValidationError("bad block")
        assert error.category == ErrorCategory.INVALID_INPUT

    def test_explicit_category_wins(self) -> None:
        error = CatalogFetchError("slow", category=ErrorCategory.TIMEOUT)
        assert error.category == ErrorCategory.TIMEOUT

    def test_subclasses_share_base(self) -> None:
        assert issubclass(CatalogFetchError, CatalogError)
        assert issubclass(CatalogValidationError, CatalogError)

    def test_from_exception_classifies(self) -> None:
        original = TimeoutError("took too long")
        error = CatalogFetchError.from_exception(original)
        assert isinstance(error, CatalogFetchError)
        assert error.category == ErrorCategory.TIMEOUT
        assert error.original_error is original

    def test_from_exception_with_category(self) -> None:
        original = OSError("no such file")
        error = CatalogError.from_exception(original, ErrorCategory.CONFIGURATION)
        assert error.category == ErrorCategory.CONFIGURATION


class TestClassifyError:
    """Tests for classify_error function."""

    def test_catalog_error_keeps_its_category(self) -> None:
        error = CatalogFetchError("x", category=ErrorCategory.NOT_FOUND)
        assert classify_error(error) == ErrorCategory.NOT_FOUND

    def test_classifies_timeout_error(self) -> None:
        assert classify_error(TimeoutError()) == ErrorCategory.TIMEOUT

    def test_classifies_asyncio_timeout(self) -> None:
        assert classify_error(asyncio.TimeoutError()) == ErrorCategory.TIMEOUT

    def test_classifies_missing_file_as_configuration(self) -> None:
        error = FileNotFoundError("blocks.json")
        assert classify_error(error) == ErrorCategory.CONFIGURATION

    def test_classifies_value_error_as_invalid_input(self) -> None:
        assert classify_error(ValueError("Expecting value")) == ErrorCategory.INVALID_INPUT

    def test_classifies_connection_message(self) -> None:
        error = Exception("Connection refused")
        assert classify_error(error) == ErrorCategory.NETWORK

    def test_classifies_404_message(self) -> None:
        assert classify_error(Exception("HTTP 404")) == ErrorCategory.NOT_FOUND

    def test_classifies_503_message(self) -> None:
        error = Exception("503 Service Unavailable")
        assert classify_error(error) == ErrorCategory.SERVICE_UNAVAILABLE

    def test_unknown_error(self) -> None:
        assert classify_error(Exception("something odd")) == ErrorCategory.UNKNOWN


class TestCategoryForStatus:
    """Tests for category_for_status function."""

    def test_not_found(self) -> None:
        assert category_for_status(404) == ErrorCategory.NOT_FOUND

    def test_server_errors(self) -> None:
        assert category_for_status(500) == ErrorCategory.SERVICE_UNAVAILABLE
        assert category_for_status(503) == ErrorCategory.SERVICE_UNAVAILABLE

    def test_other_client_errors(self) -> None:
        assert category_for_status(400) == ErrorCategory.INVALID_INPUT
