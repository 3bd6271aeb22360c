"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Typed records mapped from API responses.

Records are dataclasses whose field names match response keys. Unknown keys
are dropped; missing keys keep the field default.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

T = TypeVar("T", bound="BaseModel")


def related(model: Type["BaseModel"], many: bool = False, default: Any = None) -> Any:
    """
    Declare a field holding a nested record (or list of records).

    Example::

        @dataclass
        class ApiStorageFile(ActiveEndpoint):
            user: Optional[ApiAdminUser] = related(ApiAdminUser)
            images: List[ApiStorageImage] = related(ApiStorageImage, many=True)
    """
    metadata = {"model": model, "many": many}
    if many:
        return dataclasses.field(default_factory=list, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


class BaseModel:
    """Mixin for dataclass records built from decoded JSON."""

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Mapping[str, Any]]) -> T:
        """
        Build a record from a decoded JSON object.

        Args:
            data: Mapping of response keys to values; None gives an empty record

        Returns:
            Record instance
        """
        kwargs: Dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if not f.init or data is None or f.name not in data:
                continue
            value = data[f.name]
            model = f.metadata.get("model")
            if model is not None and value is not None:
                if f.metadata.get("many"):
                    value = model.iterator(value)
                else:
                    value = model.from_dict(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    @classmethod
    def iterator(cls: Type[T], items: Iterable[Mapping[str, Any]]) -> List[T]:
        """Map a list of decoded JSON objects."""
        if isinstance(items, Mapping):
            items = items.values()
        return [cls.from_dict(item) for item in items]

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
