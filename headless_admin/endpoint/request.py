"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Endpoint requests.

An EndpointRequest is a short-lived builder for one API call. It collects the
endpoint path template, path tokens and query arguments, then renders them
into ``(endpoint, args)`` and executes through a Client::

    response = (
        ApiAdminUser.find()
        .set_filter(or_(eq("lang_id", 1), gt("publication_date", 100)))
        .set_sort({"id": "asc", "name": "desc"})
        .set_page(2)
        .all(client)
    )

Required arguments are validated when the request is rendered, not when it
is constructed, so ``set_required_args`` and ``set_args`` may be called in
any order during configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    Union,
)

from headless_admin.endpoint.filters import FilterCondition, to_filter_args
from headless_admin.endpoint.query import ENDPOINT_NAME_TOKEN, SortSpec, substitute_tokens
from headless_admin.endpoint.response import ActiveEndpointResponse, EndpointResponse
from headless_admin.exceptions import MissingArgumentsError
from headless_admin.logging_config import get_logger
from headless_admin.transport.base import TransportResponse

if TYPE_CHECKING:
    from headless_admin.client import Client
    from headless_admin.endpoint.endpoint import Endpoint

logger = get_logger(__name__)

SortInput = Union[SortSpec, Mapping[str, Any], Iterable[Tuple[str, Any]]]


class EndpointRequest(ABC):
    """
    Base builder for a request against an endpoint definition.

    Subclasses decide how the rendered arguments are sent by implementing
    ``create_response``.
    """

    method: str = "GET"

    def __init__(self, endpoint: Type["Endpoint"]):
        self.endpoint = endpoint
        self._args: Dict[str, Any] = {}
        self._required_args: List[str] = []
        self._tokens: Dict[str, Any] = {}
        self._endpoint: Optional[str] = None
        self._cache: Optional[int] = None
        self._default_expand: List[str] = []

    @abstractmethod
    def create_response(
        self, client: "Client", endpoint: str, args: Dict[str, Any]
    ) -> TransportResponse:
        """Perform the transport call for the rendered endpoint and args."""
        ...

    def build_response(self, response: TransportResponse) -> EndpointResponse:
        return EndpointResponse(self, response)

    # Required arguments

    def set_required_args(self, keys: Iterable[str]) -> "EndpointRequest":
        """
        Replace the list of argument keys which must be present in ``get_args()``.

        Nothing is checked here; ``render()`` raises MissingArgumentsError if a
        key is still absent at that point.
        """
        self._required_args = list(keys)
        return self

    def get_required_args(self) -> List[str]:
        return list(self._required_args)

    def ensure_required_arguments(self) -> None:
        """
        Raises:
            MissingArgumentsError: If any required key is absent from the arguments
        """
        missing = [key for key in self._required_args if key not in self._args]
        if missing:
            raise MissingArgumentsError(missing)

    # Arguments

    def set_args(self, args: Mapping[str, Any]) -> "EndpointRequest":
        """Shallow-merge ``args`` into the accumulated arguments."""
        self._args.update(args)
        return self

    def get_args(self) -> Dict[str, Any]:
        return dict(self._args)

    def set_expand(self, fields: Iterable[str]) -> "EndpointRequest":
        return self.set_args({"expand": ",".join(fields)})

    def set_default_expand(self, fields: Iterable[str]) -> "EndpointRequest":
        """Expand fields always sent, in addition to any from set_expand()."""
        self._default_expand = list(fields)
        return self

    def set_page(self, page: int) -> "EndpointRequest":
        return self.set_args({"page": page})

    def set_per_page(self, rows: int) -> "EndpointRequest":
        return self.set_args({"per-page": rows})

    def set_sort(self, sort: SortInput) -> "EndpointRequest":
        """
        Set the sort order.

        Accepts a SortSpec, ``{"id": "asc", "name": "desc"}`` or
        ``[("id", SortDirection.ASC), ("name", SortDirection.DESC)]``;
        both of the latter serialize to ``id,-name``.
        """
        return self.set_args({"sort": SortSpec.coerce(sort).serialize()})

    def set_filter(self, condition: Union[FilterCondition, Mapping[str, Any]]) -> "EndpointRequest":
        """
        Set filter conditions.

        The filters must be enabled on the API side, otherwise they have no
        effect. The nested shape is kept as-is; the transport flattens it
        into ``filter[...]`` query parameters.
        """
        return self.set_args({"filter": to_filter_args(condition)})

    # Endpoint

    def set_tokens(self, tokens: Mapping[str, Any]) -> "EndpointRequest":
        """
        Set tokens replaced in the endpoint template, e.g. ``{"{id}": 1}``
        for ``admin/api-admin-user/{id}``.
        """
        self._tokens = dict(tokens)
        return self

    def get_tokens(self) -> Dict[str, Any]:
        return dict(self._tokens)

    def set_endpoint(self, name: str) -> "EndpointRequest":
        """
        Override or extend the endpoint name of the endpoint definition.

        Use ``{endpointName}/file`` to extend the default name.
        """
        self._endpoint = name
        return self

    def get_endpoint(self) -> str:
        """Endpoint template with every token substituted."""
        endpoint_name = self.endpoint.get_endpoint_name()
        tokens = {ENDPOINT_NAME_TOKEN: endpoint_name, **self._tokens}
        return substitute_tokens(self._endpoint or endpoint_name, tokens)

    # Cache

    def set_cache(self, ttl: Optional[int]) -> "EndpointRequest":
        """Cache the response for ``ttl`` seconds; None disables caching."""
        self._cache = ttl
        return self

    def get_cache(self) -> Optional[int]:
        return self._cache

    # Execution

    def render(self) -> Tuple[str, Dict[str, Any]]:
        """
        Validate and render the request.

        Returns:
            ``(endpoint, args)`` with default expand fields merged in

        Raises:
            MissingArgumentsError: If a required argument is absent
        """
        self.ensure_required_arguments()
        args = self.get_args()
        if self._default_expand:
            fields = list(self._default_expand)
            for name in str(args.get("expand", "")).split(","):
                if name and name not in fields:
                    fields.append(name)
            args["expand"] = ",".join(fields)
        return self.get_endpoint(), args

    def response(self, client: "Client") -> EndpointResponse:
        """Render the request and execute it, using the client cache if enabled."""
        endpoint, args = self.render()
        ttl = self.get_cache()

        if ttl is not None and client.cache is not None:
            key = client.generate_cache_key(type(self), endpoint, args)
            cached = client.get_or_set_cache(
                key, ttl, lambda: self.create_response(client, endpoint, args).to_dict()
            )
            return self.build_response(TransportResponse.from_dict(cached))

        return self.build_response(self.create_response(client, endpoint, args))


class GetEndpointRequest(EndpointRequest):
    """GET request sending the arguments as query parameters."""

    method = "GET"

    def create_response(self, client, endpoint, args):
        return client.execute(self.method, endpoint, params=args)


class DeleteEndpointRequest(EndpointRequest):
    """DELETE request sending the arguments as query parameters."""

    method = "DELETE"

    def create_response(self, client, endpoint, args):
        return client.execute(self.method, endpoint, params=args)


class PostEndpointRequest(EndpointRequest):
    """POST request sending the arguments as the form body."""

    method = "POST"

    def create_response(self, client, endpoint, args):
        return client.execute(self.method, endpoint, data=args)


class PutEndpointRequest(EndpointRequest):
    """PUT request sending the arguments as the form body."""

    method = "PUT"

    def create_response(self, client, endpoint, args):
        return client.execute(self.method, endpoint, data=args)


class ActiveEndpointRequest(GetEndpointRequest):
    """GET request whose response maps into the endpoint's record type."""

    def build_response(self, response: TransportResponse) -> ActiveEndpointResponse:
        return ActiveEndpointResponse(self, response, self.endpoint)

    def all(self, client: "Client") -> ActiveEndpointResponse:
        """Execute and return the response; records are in ``.models``."""
        return self.response(client)

    def first(self, client: "Client"):
        """First record of a list response, or None."""
        return self.response(client).first()

    def one(self, client: "Client"):
        """Record of a single-object response, or None on errors."""
        return self.response(client).model
