"""
SDK client for the headless admin API.

Holds the server location, language and credentials, the transport that
performs HTTP calls and the optional response cache shared by all endpoint
requests executed through it.
"""

from typing import Any, Callable, Mapping, Optional

from headless_admin.cache import CacheBackend, create_cache, generate_cache_key, get_or_set_cache
from headless_admin.config.settings import HeadlessConfig
from headless_admin.endpoint.query import expand_endpoint_prefix
from headless_admin.exceptions import InvalidConfigurationError
from headless_admin.logging_config import get_logger
from headless_admin.transport.base import BaseTransport, TransportResponse
from headless_admin.transport.http import HttpTransport

logger = get_logger(__name__)


class Client:
    """
    Entry point for executing endpoint requests.

    Example:
        >>> client = Client("https://example.com", language="en", access_token="...")
        >>> users = ApiAdminUser.find().set_per_page(10).all(client).models
    """

    def __init__(
        self,
        server_url: str,
        language: Optional[str] = None,
        access_token: Optional[str] = None,
        cache: Optional[CacheBackend] = None,
        transport: Optional[BaseTransport] = None,
        timeout: int = 30,
        endpoint_prefix: str = "admin/",
        cache_key_prefix: str = "headless",
    ):
        """
        Initialize the client.

        Args:
            server_url: Base URL of the API server (e.g., "https://example.com")
            language: Optional language short code inserted after the server URL
            access_token: Optional bearer token for the default HTTP transport
            cache: Optional response cache; None disables caching
            transport: Transport to use; defaults to HttpTransport
            timeout: Request timeout in seconds for the default transport
            endpoint_prefix: Expansion for ``{{%name}}`` endpoint names
            cache_key_prefix: Namespace for generated cache keys

        Raises:
            InvalidConfigurationError: If server_url is empty
        """
        if not server_url:
            raise InvalidConfigurationError("server_url is required")

        self.server_url = server_url
        self.language = language
        self.access_token = access_token
        self.cache = cache
        self.endpoint_prefix = endpoint_prefix
        self.cache_key_prefix = cache_key_prefix
        self.transport = transport or HttpTransport(access_token=access_token, timeout=timeout)

        logger.debug(
            f"Initialized client: server_url={server_url}, language={language}, "
            f"cache={type(cache).__name__ if cache else None}"
        )

    @classmethod
    def from_config(
        cls,
        config: HeadlessConfig,
        transport: Optional[BaseTransport] = None,
    ) -> "Client":
        """
        Build a client, its cache and transport from loaded configuration.

        Args:
            config: Loaded configuration
            transport: Optional transport overriding the default HTTP transport

        Returns:
            Configured client
        """
        return cls(
            server_url=config.client.server_url,
            language=config.client.language or None,
            access_token=config.client.access_token or None,
            cache=create_cache(config.cache),
            transport=transport,
            timeout=config.client.timeout,
            endpoint_prefix=config.client.endpoint_prefix,
            cache_key_prefix=config.cache.key_prefix,
        )

    def get_request_url(self, endpoint: str) -> str:
        """
        Full request URL from server URL, language and endpoint.

        Empty parts are skipped, so a client without a language yields
        ``<server_url>/<endpoint>``.
        """
        endpoint = expand_endpoint_prefix(endpoint, self.endpoint_prefix)
        parts = [self.server_url.rstrip('/'), self.language, endpoint.lstrip('/')]
        return "/".join(part for part in parts if part)

    def execute(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """Perform one transport call against ``endpoint``."""
        return self.transport.execute(
            method, self.get_request_url(endpoint), params=params, data=data
        )

    def generate_cache_key(
        self,
        request_type: type,
        endpoint: str,
        args: Mapping[str, Any],
    ) -> str:
        """Cache key for a request against this client's full request URL."""
        return generate_cache_key(
            request_type, self.get_request_url(endpoint), args, prefix=self.cache_key_prefix
        )

    def get_or_set_cache(self, key: str, ttl: Optional[int], fn: Callable[[], Any]) -> Any:
        return get_or_set_cache(self.cache, key, ttl, fn)

    def close(self) -> None:
        """Release transport resources."""
        self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
