"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Endpoint definitions, request builders, filters and responses.
"""

from headless_admin.endpoint.endpoint import ActiveEndpoint, Endpoint
from headless_admin.endpoint.filters import (
    Comparison,
    FilterCondition,
    Logical,
    LogicalKind,
    Operator,
    all_of,
    and_,
    eq,
    gt,
    gte,
    in_,
    like,
    lt,
    lte,
    neq,
    nin,
    not_,
    or_,
    parse_filter,
    to_filter_args,
)
from headless_admin.endpoint.query import (
    ENDPOINT_NAME_TOKEN,
    SortDirection,
    SortSpec,
    expand_endpoint_prefix,
    substitute_tokens,
)
from headless_admin.endpoint.request import (
    ActiveEndpointRequest,
    DeleteEndpointRequest,
    EndpointRequest,
    GetEndpointRequest,
    PostEndpointRequest,
    PutEndpointRequest,
)
from headless_admin.endpoint.response import ActiveEndpointResponse, EndpointResponse

__all__ = [
    "ActiveEndpoint",
    "ActiveEndpointRequest",
    "ActiveEndpointResponse",
    "Comparison",
    "DeleteEndpointRequest",
    "ENDPOINT_NAME_TOKEN",
    "Endpoint",
    "EndpointRequest",
    "EndpointResponse",
    "FilterCondition",
    "GetEndpointRequest",
    "Logical",
    "LogicalKind",
    "Operator",
    "PostEndpointRequest",
    "PutEndpointRequest",
    "SortDirection",
    "SortSpec",
    "all_of",
    "and_",
    "eq",
    "expand_endpoint_prefix",
    "gt",
    "gte",
    "in_",
    "like",
    "lt",
    "lte",
    "neq",
    "nin",
    "not_",
    "or_",
    "parse_filter",
    "substitute_tokens",
    "to_filter_args",
]
