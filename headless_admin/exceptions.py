"""
Exception hierarchy for the Headless Admin SDK.

All custom exceptions inherit from HeadlessError base class.
"""


class HeadlessError(Exception):
    """Base exception for all Headless Admin SDK errors."""
    pass


# Request Errors
class RequestError(HeadlessError):
    """Base exception for errors raised while building an endpoint request."""
    pass


class MissingArgumentsError(RequestError):
    """Raised when a required argument key is absent at render time."""

    def __init__(self, missing, message=None):
        self.missing = list(missing)
        super().__init__(
            message or f"Missing required arguments: {', '.join(self.missing)}"
        )


class UnsupportedOperationError(RequestError):
    """Raised when an endpoint explicitly disables an operation."""
    pass


class InvalidFilterError(RequestError):
    """Raised when a filter condition is invalid or malformed."""
    pass


# Transport Errors
class TransportError(HeadlessError):
    """Raised when the transport cannot complete an HTTP call."""
    pass


# Response Errors
class ResponseError(HeadlessError):
    """Base exception for response-related errors."""
    pass


class ResponseParseError(ResponseError):
    """Raised when a response body cannot be decoded as JSON."""
    pass


# Cache Errors
class CacheError(HeadlessError):
    """Raised when a cache backend operation fails."""
    pass


# Configuration Errors
class ConfigurationError(HeadlessError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass
