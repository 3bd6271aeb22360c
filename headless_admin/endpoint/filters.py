"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Filter conditions for list endpoints.

A filter is a small tree of comparisons joined by logical operators. It is
sent as a nested mapping following the Yii2 data filter convention::

    {"lang_id": 1}                                  # lang_id = 1
    {"publication_date": {"lt": 100, "gt": 10}}     # 10 < publication_date < 100
    {"or": [{"lang_id": 1}, {"lang_id": 2}]}        # lang_id = 1 OR lang_id = 2
    {"deleted_at": "NULL"}                          # deleted_at IS NULL

Build trees with the helper functions and serialize them with
``to_filter_args``; ``parse_filter`` turns a nested mapping back into a tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple, Union

from headless_admin.exceptions import InvalidFilterError


class Operator(str, Enum):
    """Comparison operators understood by the server."""
    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    GT = "gt"
    LTE = "lte"
    GTE = "gte"
    IN = "in"
    NIN = "nin"
    LIKE = "like"


class LogicalKind(str, Enum):
    """Logical operators combining child conditions."""
    AND = "and"
    OR = "or"
    NOT = "not"


LIST_OPERATORS = (Operator.IN, Operator.NIN)
LOGICAL_KEYS = frozenset(kind.value for kind in LogicalKind)
# Literal the server's data filter reads as null
NULL_VALUE = "NULL"
_SCALAR_TYPES = (str, int, float, bool)


@dataclass(frozen=True)
class Comparison:
    """``field <operator> value``."""
    field: str
    operator: Operator
    value: Any

    def __post_init__(self):
        if not self.field:
            raise InvalidFilterError("Comparison field cannot be empty")
        try:
            operator = Operator(self.operator)
        except ValueError:
            raise InvalidFilterError(
                f"Unknown filter operator '{self.operator}' for field '{self.field}'"
            ) from None
        object.__setattr__(self, "operator", operator)

        if operator in LIST_OPERATORS:
            if not isinstance(self.value, (list, tuple)):
                raise InvalidFilterError(
                    f"Operator '{operator.value}' on '{self.field}' requires a list value"
                )
            object.__setattr__(self, "value", list(self.value))
        elif self.value is not None and not isinstance(self.value, _SCALAR_TYPES):
            raise InvalidFilterError(
                f"Operator '{operator.value}' on '{self.field}' requires a scalar value, "
                f"got {type(self.value).__name__}"
            )


@dataclass(frozen=True)
class Logical:
    """Logical combination of one or more conditions.

    ``implicit`` marks an AND that came from a single mapping (several keys,
    or several operators on one field); it serializes back into one mapping
    instead of an explicit ``and`` list.
    """
    kind: LogicalKind
    conditions: Tuple["FilterCondition", ...]
    implicit: bool = field(default=False, compare=False)

    def __post_init__(self):
        try:
            kind = LogicalKind(self.kind)
        except ValueError:
            raise InvalidFilterError(f"Unknown logical operator '{self.kind}'") from None
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "conditions", tuple(self.conditions))
        if not self.conditions:
            raise InvalidFilterError(f"'{kind.value}' requires at least one condition")
        for condition in self.conditions:
            if not isinstance(condition, (Comparison, Logical)):
                raise InvalidFilterError(
                    f"'{kind.value}' children must be filter conditions, "
                    f"got {type(condition).__name__}"
                )
        if self.implicit and kind != LogicalKind.AND:
            raise InvalidFilterError("Only 'and' conditions can be implicit")


FilterCondition = Union[Comparison, Logical]


# Builders

def eq(name: str, value: Any) -> Comparison:
    return Comparison(name, Operator.EQ, value)


def neq(name: str, value: Any) -> Comparison:
    return Comparison(name, Operator.NEQ, value)


def lt(name: str, value: Any) -> Comparison:
    return Comparison(name, Operator.LT, value)


def gt(name: str, value: Any) -> Comparison:
    return Comparison(name, Operator.GT, value)


def lte(name: str, value: Any) -> Comparison:
    return Comparison(name, Operator.LTE, value)


def gte(name: str, value: Any) -> Comparison:
    return Comparison(name, Operator.GTE, value)


def in_(name: str, values) -> Comparison:
    return Comparison(name, Operator.IN, values)


def nin(name: str, values) -> Comparison:
    return Comparison(name, Operator.NIN, values)


def like(name: str, value: str) -> Comparison:
    return Comparison(name, Operator.LIKE, value)


def and_(*conditions: FilterCondition) -> Logical:
    return Logical(LogicalKind.AND, conditions)


def or_(*conditions: FilterCondition) -> Logical:
    return Logical(LogicalKind.OR, conditions)


def not_(*conditions: FilterCondition) -> Logical:
    return Logical(LogicalKind.NOT, conditions)


def all_of(*conditions: FilterCondition) -> Logical:
    """AND sent as a single mapping, e.g. two operators on one field."""
    return Logical(LogicalKind.AND, conditions, implicit=True)


# Serialization

def _wire_value(value: Any) -> Any:
    if value is None:
        return NULL_VALUE
    if isinstance(value, list):
        return [_wire_value(item) for item in value]
    return value


def _comparison_args(condition: Comparison) -> Dict[str, Any]:
    value = _wire_value(condition.value)
    if condition.operator == Operator.EQ:
        return {condition.field: value}
    return {condition.field: {condition.operator.value: value}}


def _merge_implicit(condition: Logical) -> Union[Dict[str, Any], None]:
    """Merge children into one mapping, or None when keys would collide."""
    merged: Dict[str, Any] = {}
    for child in condition.conditions:
        if isinstance(child, Comparison):
            op = child.operator.value
            if child.field not in merged:
                merged.update(_comparison_args(child))
                continue
            existing = merged[child.field]
            if not isinstance(existing, dict):
                # a bare eq value already claimed the field
                existing = {Operator.EQ.value: existing}
            if op in existing:
                return None
            merged[child.field] = {**existing, op: _wire_value(child.value)}
        else:
            child_args = _serialize(child)
            if any(key in merged for key in child_args):
                return None
            merged.update(child_args)
    return merged


def _serialize(condition: FilterCondition) -> Dict[str, Any]:
    if isinstance(condition, Comparison):
        return _comparison_args(condition)
    if condition.implicit:
        merged = _merge_implicit(condition)
        if merged is not None:
            return merged
    return {condition.kind.value: [_serialize(child) for child in condition.conditions]}


def to_filter_args(condition: Union[FilterCondition, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Serialize a filter into the nested mapping sent as ``filter``.

    Raw mappings are passed through unchanged (as a shallow copy) so
    server-specific operators remain usable.

    Args:
        condition: Filter tree or an already-shaped mapping

    Returns:
        Nested mapping preserving the tree shape
    """
    if isinstance(condition, (Comparison, Logical)):
        return _serialize(condition)
    if isinstance(condition, Mapping):
        return dict(condition)
    raise InvalidFilterError(
        f"Filter must be a condition or a mapping, got {type(condition).__name__}"
    )


def _python_value(value: Any) -> Any:
    if value == NULL_VALUE:
        return None
    if isinstance(value, (list, tuple)):
        return [_python_value(item) for item in value]
    return value


def _parse_field(name: str, value: Any) -> FilterCondition:
    if isinstance(value, Mapping):
        if not value:
            raise InvalidFilterError(f"Field '{name}' has an empty operator mapping")
        comparisons: List[FilterCondition] = [
            Comparison(name, op, _python_value(operand)) for op, operand in value.items()
        ]
        if len(comparisons) == 1:
            return comparisons[0]
        return Logical(LogicalKind.AND, comparisons, implicit=True)
    if isinstance(value, (list, tuple)):
        return Comparison(name, Operator.IN, _python_value(value))
    return Comparison(name, Operator.EQ, _python_value(value))


def _parse_logical(kind: LogicalKind, value: Any) -> Logical:
    if isinstance(value, Mapping):
        children = [parse_filter(value)]
    elif isinstance(value, (list, tuple)):
        children = [parse_filter(item) for item in value]
    else:
        raise InvalidFilterError(
            f"'{kind.value}' expects a list of conditions, got {type(value).__name__}"
        )
    return Logical(kind, children)


def parse_filter(args: Mapping[str, Any]) -> FilterCondition:
    """
    Reconstruct a filter tree from its nested mapping form.

    A mapping with several keys becomes an implicit AND of its entries.

    Raises:
        InvalidFilterError: If the mapping is empty or uses unknown operators
    """
    if not isinstance(args, Mapping) or not args:
        raise InvalidFilterError("Filter mapping cannot be empty")

    children: List[FilterCondition] = []
    for key, value in args.items():
        if key in LOGICAL_KEYS:
            children.append(_parse_logical(LogicalKind(key), value))
        else:
            children.append(_parse_field(key, value))

    if len(children) == 1:
        return children[0]
    return Logical(LogicalKind.AND, children, implicit=True)
