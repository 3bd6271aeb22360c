"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Sort specifications and endpoint token substitution.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Mapping, Tuple, Union

from headless_admin.exceptions import RequestError

ENDPOINT_NAME_TOKEN = "{endpointName}"

_PREFIX_PATTERN = re.compile(r"\{\{%([^}]*)\}\}")


class SortDirection(str, Enum):
    """Sort order for a single field."""
    ASC = "asc"
    DESC = "desc"


def _direction(name: str, direction: object) -> SortDirection:
    if isinstance(direction, str) and not isinstance(direction, SortDirection):
        direction = direction.lower()
    try:
        return SortDirection(direction)
    except ValueError:
        raise RequestError(
            f"Unknown sort direction '{direction}' for field '{name}'"
        ) from None


@dataclass
class SortSpec:
    """Ordered list of ``(field, direction)`` pairs."""
    fields: List[Tuple[str, SortDirection]] = field(default_factory=list)

    def asc(self, name: str) -> "SortSpec":
        self.fields.append((name, SortDirection.ASC))
        return self

    def desc(self, name: str) -> "SortSpec":
        self.fields.append((name, SortDirection.DESC))
        return self

    def serialize(self) -> str:
        """Comma-joined field list, descending fields prefixed with ``-``."""
        return ",".join(
            name if direction == SortDirection.ASC else f"-{name}"
            for name, direction in self.fields
        )

    @classmethod
    def parse(cls, value: str) -> "SortSpec":
        """Inverse of serialize(): ``"id,-name"`` -> id asc, name desc."""
        spec = cls()
        for part in value.split(","):
            part = part.strip()
            if not part:
                continue
            if part.startswith("-"):
                spec.desc(part[1:])
            else:
                spec.asc(part)
        return spec

    @classmethod
    def coerce(
        cls,
        sort: Union["SortSpec", Mapping[str, object], Iterable[Tuple[str, object]]],
    ) -> "SortSpec":
        """
        Build a SortSpec from the accepted sort shapes.

        Accepts an existing SortSpec, a ``{field: direction}`` mapping or a
        sequence of ``(field, direction)`` pairs. Directions may be
        SortDirection members or the strings ``asc``/``desc`` in any case.

        Raises:
            RequestError: If a direction is unknown
        """
        if isinstance(sort, SortSpec):
            return sort
        pairs = sort.items() if isinstance(sort, Mapping) else sort
        return cls([(name, _direction(name, direction)) for name, direction in pairs])


def substitute_tokens(template: str, tokens: Mapping[str, object]) -> str:
    """
    Replace every literal occurrence of each token key with its value.

    Substitution is plain string replacement, not regex. Tokens absent from
    the mapping are left untouched.

    >>> substitute_tokens("admin/api-user/{id}", {"{id}": 42})
    'admin/api-user/42'
    """
    for key, value in tokens.items():
        template = template.replace(key, str(value))
    return template


def expand_endpoint_prefix(name: str, prefix: str) -> str:
    """Expand ``{{%api-admin-user}}`` to ``<prefix>api-admin-user``."""
    return _PREFIX_PATTERN.sub(lambda m: f"{prefix}{m.group(1)}", name)
