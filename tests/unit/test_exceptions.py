"""
Unit tests for exception hierarchy.
"""

import pytest

from headless_admin.exceptions import (
    CacheError,
    ConfigurationError,
    HeadlessError,
    InvalidConfigurationError,
    InvalidFilterError,
    MissingArgumentsError,
    RequestError,
    ResponseError,
    ResponseParseError,
    TransportError,
    UnsupportedOperationError,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correctly defined."""

    def test_base_exception(self):
        """Test that HeadlessError is the base exception."""
        error = HeadlessError("test error")
        assert isinstance(error, Exception)
        assert str(error) == "test error"

    def test_request_errors_inherit_from_base(self):
        """Test that request errors inherit from RequestError."""
        assert issubclass(RequestError, HeadlessError)
        assert issubclass(MissingArgumentsError, RequestError)
        assert issubclass(UnsupportedOperationError, RequestError)
        assert issubclass(InvalidFilterError, RequestError)

    def test_other_errors_inherit_from_base(self):
        """Test the remaining branches."""
        assert issubclass(TransportError, HeadlessError)
        assert issubclass(ResponseParseError, ResponseError)
        assert issubclass(ResponseError, HeadlessError)
        assert issubclass(CacheError, HeadlessError)
        assert issubclass(InvalidConfigurationError, ConfigurationError)
        assert issubclass(ConfigurationError, HeadlessError)


class TestMissingArgumentsError:
    """Test MissingArgumentsError details."""

    def test_lists_missing_keys(self):
        """Test the default message and the missing attribute."""
        error = MissingArgumentsError(("id", "name"))
        assert error.missing == ["id", "name"]
        assert str(error) == "Missing required arguments: id, name"

    def test_custom_message(self):
        """Test overriding the message."""
        assert str(MissingArgumentsError(["id"], "no id")) == "no id"

    def test_catchable_as_base(self):
        """Test catching through the base class."""
        with pytest.raises(HeadlessError):
            raise MissingArgumentsError(["id"])
