"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Headless Admin SDK - Python client for headless CMS administration APIs

Builds endpoint requests with filters, sorting, pagination and field
expansion, maps JSON responses into typed records and optionally caches
responses.
"""

from headless_admin._version import __version__
from headless_admin.client import Client
from headless_admin.endpoint import (
    ActiveEndpoint,
    Endpoint,
    EndpointRequest,
    EndpointResponse,
    SortDirection,
    SortSpec,
)

__all__ = [
    "__version__",
    "ActiveEndpoint",
    "Client",
    "Endpoint",
    "EndpointRequest",
    "EndpointResponse",
    "SortDirection",
    "SortSpec",
]
