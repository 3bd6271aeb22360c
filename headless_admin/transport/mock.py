"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Mock transport for local testing.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from headless_admin.transport.base import BaseTransport, TransportResponse


@dataclass
class SentRequest:
    """A request recorded by ``MockTransport``."""
    method: str
    url: str
    params: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None


class MockTransport(BaseTransport):
    """In-memory transport for unit tests.

    Args:
        responses: Mapping from ``(method, url)`` tuples to
            ``TransportResponse`` instances.

    Example::

        transport = MockTransport({
            ("GET", "http://api/admin/api-admin-user"): MockTransport.json([]),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], TransportResponse]] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], TransportResponse] = responses or {}
        self._sent: List[SentRequest] = []

    @staticmethod
    def json(
        content: Any,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        """Build a JSON response fixture."""
        return TransportResponse(
            body=json.dumps(content),
            status_code=status_code,
            headers={"Content-Type": "application/json", **(headers or {})},
            success=200 <= status_code < 300,
        )

    def add_response(self, method: str, url: str, response: TransportResponse) -> None:
        self._responses[(method.upper(), url)] = response

    def execute(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        self._sent.append(SentRequest(
            method=method.upper(),
            url=url,
            params=dict(params) if params is not None else None,
            data=dict(data) if data is not None else None,
        ))
        key = (method.upper(), url)
        if key in self._responses:
            return self._responses[key]
        return self.json({"error": "not mocked"}, status_code=404)

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def sent_requests(self) -> List[SentRequest]:
        """All requests that have been sent through this transport."""
        return list(self._sent)
