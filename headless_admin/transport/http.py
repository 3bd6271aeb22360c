"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

HTTP transport (default) built on ``requests``.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional

import requests

from headless_admin._version import __version__
from headless_admin.exceptions import TransportError
from headless_admin.logging_config import get_logger, log_api_request
from headless_admin.transport.base import BaseTransport, TransportResponse
from headless_admin.transport.query import flatten_params

logger = get_logger(__name__)


class HttpTransport(BaseTransport):
    """Default HTTP transport using a ``requests.Session``.

    Nested query arguments and request bodies are flattened into bracket
    notation; bodies are sent form-encoded. No retries are attempted.

    Args:
        access_token: Optional token added as ``Authorization: Bearer`` header.
        timeout: Request timeout in seconds.
        session: Optional pre-configured session.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"Headless-Admin-SDK/{__version__}",
        })
        if access_token:
            self.session.headers.update({
                "Authorization": f"Bearer {access_token}"
            })

    def execute(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        method = method.upper()
        start = time.monotonic()

        try:
            logger.debug(f"Making {method} request to {url}")
            response = self.session.request(
                method=method,
                url=url,
                params=flatten_params(params) if params else None,
                data=flatten_params(data) if data else None,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout: {method} {url}", exc_info=True)
            raise TransportError(f"Request timeout: {e}") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error: {method} {url}", exc_info=True)
            raise TransportError(f"Connection error: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {method} {url}", exc_info=True)
            raise TransportError(f"Request failed: {e}") from e

        elapsed = round((time.monotonic() - start) * 1000, 2)
        log_api_request(logger, method, response.url, response.status_code, elapsed)

        return TransportResponse(
            body=response.text,
            status_code=response.status_code,
            headers=dict(response.headers),
            success=response.ok,
            elapsed_ms=elapsed,
        )

    def close(self) -> None:
        """Close the HTTP session and release resources."""
        if self.session:
            self.session.close()
            logger.debug("Closed HTTP transport session")
