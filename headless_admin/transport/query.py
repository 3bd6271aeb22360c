"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Query-string encoding for nested request arguments.

The admin API reads nested parameters in bracket notation, e.g.
``filter[or][0][lang_id]=1``. Mappings and lists are flattened into
``(key, value)`` pairs; booleans become ``1``/``0`` and ``None`` values are
dropped.
"""

from typing import Any, List, Mapping, Tuple


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _flatten(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
    else:
        pairs.append((prefix, _scalar(value)))


def flatten_params(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a nested argument mapping into query-string pairs.

    Args:
        params: Argument mapping, possibly containing nested mappings/lists

    Returns:
        Ordered list of ``(key, value)`` pairs ready for URL encoding

    Example:
        >>> flatten_params({"filter": {"lang_id": {"in": [1, 2]}}, "page": 2})
        [('filter[lang_id][in][0]', '1'), ('filter[lang_id][in][1]', '2'), ('page', '2')]
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        _flatten(str(key), value, pairs)
    return pairs
