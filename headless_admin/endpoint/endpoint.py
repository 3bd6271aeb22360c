"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Endpoint definitions.

An Endpoint names an API path; an ActiveEndpoint is additionally a record
type, so its list/view requests map responses into instances of itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Iterator, Mapping

from headless_admin.endpoint.request import (
    ActiveEndpointRequest,
    DeleteEndpointRequest,
    GetEndpointRequest,
    PostEndpointRequest,
    PutEndpointRequest,
)
from headless_admin.endpoint.response import EndpointResponse
from headless_admin.exceptions import RequestError
from headless_admin.logging_config import get_logger
from headless_admin.models.base import BaseModel

if TYPE_CHECKING:
    from headless_admin.client import Client

logger = get_logger(__name__)

ID_TOKEN = "{id}"


class Endpoint:
    """
    Base endpoint definition.

    Subclasses declare ``endpoint_name``; it may use the ``{{%name}}``
    prefix form, which the client expands with its endpoint prefix.
    """

    endpoint_name: ClassVar[str] = ""

    @classmethod
    def get_endpoint_name(cls) -> str:
        if not cls.endpoint_name:
            raise RequestError(f"{cls.__name__} does not declare an endpoint_name")
        return cls.endpoint_name

    @classmethod
    def get(cls) -> GetEndpointRequest:
        return GetEndpointRequest(cls)

    @classmethod
    def post(cls) -> PostEndpointRequest:
        return PostEndpointRequest(cls)

    @classmethod
    def put(cls) -> PutEndpointRequest:
        return PutEndpointRequest(cls)

    @classmethod
    def delete(cls) -> DeleteEndpointRequest:
        return DeleteEndpointRequest(cls)


class ActiveEndpoint(Endpoint, BaseModel):
    """Endpoint that is also the record type of its responses."""

    @classmethod
    def find(cls) -> ActiveEndpointRequest:
        """List request, e.g. ``ApiAdminUser.find().set_page(2).all(client)``."""
        return ActiveEndpointRequest(cls)

    @classmethod
    def view(cls, id: Any) -> ActiveEndpointRequest:
        """Single record request against ``{endpointName}/{id}``."""
        return (
            ActiveEndpointRequest(cls)
            .set_endpoint("{endpointName}/" + ID_TOKEN)
            .set_tokens({ID_TOKEN: id})
        )

    @classmethod
    def find_all(cls, client: "Client", per_page: int = 100) -> Iterator[Any]:
        """
        Iterate every record of a list endpoint, page by page.

        Stops after the last page reported by the pagination headers, or
        on the first error or empty page.
        """
        page = 1
        while True:
            response = cls.find().set_page(page).set_per_page(per_page).all(client)
            if response.is_error:
                logger.warning(
                    f"Stopped paging {cls.__name__} at page {page}: "
                    f"status {response.status_code}"
                )
                return
            models = response.models
            yield from models
            if not models or response.is_last_page():
                return
            page += 1

    @classmethod
    def insert(cls, client: "Client", values: Mapping[str, Any]) -> EndpointResponse:
        return cls.post().set_args(values).response(client)

    @classmethod
    def update(cls, client: "Client", id: Any, values: Mapping[str, Any]) -> EndpointResponse:
        return (
            cls.put()
            .set_endpoint("{endpointName}/" + ID_TOKEN)
            .set_tokens({ID_TOKEN: id})
            .set_args(values)
            .response(client)
        )

    @classmethod
    def remove(cls, client: "Client", id: Any) -> EndpointResponse:
        return (
            cls.delete()
            .set_endpoint("{endpointName}/" + ID_TOKEN)
            .set_tokens({ID_TOKEN: id})
            .response(client)
        )
