"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Pluggable transports for the Headless Admin SDK.
"""

from headless_admin.transport.base import BaseTransport, TransportResponse
from headless_admin.transport.http import HttpTransport
from headless_admin.transport.mock import MockTransport, SentRequest
from headless_admin.transport.query import flatten_params

__all__ = [
    "BaseTransport",
    "HttpTransport",
    "MockTransport",
    "SentRequest",
    "TransportResponse",
    "flatten_params",
]
