"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Endpoint responses.

Wraps the raw transport outcome and exposes the decoded JSON content and the
pagination headers the admin API sends on list endpoints.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Generic, List, Optional, Type, TypeVar

from headless_admin.exceptions import ResponseParseError
from headless_admin.transport.base import TransportResponse

if TYPE_CHECKING:
    from headless_admin.endpoint.request import EndpointRequest
    from headless_admin.models.base import BaseModel

M = TypeVar("M", bound="BaseModel")

HEADER_TOTAL_COUNT = "X-Pagination-Total-Count"
HEADER_PAGE_COUNT = "X-Pagination-Page-Count"
HEADER_CURRENT_PAGE = "X-Pagination-Current-Page"
HEADER_PER_PAGE = "X-Pagination-Per-Page"

_UNPARSED = object()


class EndpointResponse:
    """
    Result of executing an endpoint request.

    HTTP error statuses are not raised; check ``is_success``/``is_error`` and
    ``status_code``.
    """

    def __init__(self, request: "EndpointRequest", response: TransportResponse):
        self.endpoint_request = request
        self.transport_response = response
        self._content: Any = _UNPARSED

    @property
    def status_code(self) -> int:
        return self.transport_response.status_code

    @property
    def is_success(self) -> bool:
        return self.transport_response.success

    @property
    def is_error(self) -> bool:
        return not self.transport_response.success

    @property
    def raw_content(self) -> str:
        return self.transport_response.body

    @property
    def content(self) -> Any:
        """
        Decoded JSON body, parsed once on first access.

        An empty body decodes to None.

        Raises:
            ResponseParseError: If the body is not valid JSON
        """
        if self._content is _UNPARSED:
            body = self.transport_response.body
            if not body:
                self._content = None
            else:
                try:
                    self._content = json.loads(body)
                except ValueError as e:
                    raise ResponseParseError(
                        f"Response body (status {self.status_code}) is not valid JSON: {e}"
                    ) from e
        return self._content

    def get_header(self, key: str) -> Optional[str]:
        return self.transport_response.get_header(key)

    def _int_header(self, key: str) -> Optional[int]:
        value = self.get_header(key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def total_count(self) -> Optional[int]:
        return self._int_header(HEADER_TOTAL_COUNT)

    @property
    def page_count(self) -> Optional[int]:
        return self._int_header(HEADER_PAGE_COUNT)

    @property
    def current_page(self) -> Optional[int]:
        return self._int_header(HEADER_CURRENT_PAGE)

    @property
    def per_page(self) -> Optional[int]:
        return self._int_header(HEADER_PER_PAGE)

    def is_last_page(self) -> bool:
        """True when pagination headers are absent or the current page is the last."""
        current, count = self.current_page, self.page_count
        if current is None or count is None:
            return True
        return current >= count


class ActiveEndpointResponse(EndpointResponse, Generic[M]):
    """Endpoint response whose content maps into a record type."""

    def __init__(
        self,
        request: "EndpointRequest",
        response: TransportResponse,
        model_class: Type[M],
    ):
        super().__init__(request, response)
        self.model_class = model_class

    @property
    def models(self) -> List[M]:
        """Records built from a list response; empty on errors."""
        if self.is_error:
            return []
        content = self.content
        if isinstance(content, dict):
            content = [content]
        return self.model_class.iterator(content or [])

    @property
    def model(self) -> Optional[M]:
        """Record built from a single-object response, None on errors."""
        if self.is_error or not isinstance(self.content, dict):
            return None
        return self.model_class.from_dict(self.content)

    def first(self) -> Optional[M]:
        models = self.models
        return models[0] if models else None
