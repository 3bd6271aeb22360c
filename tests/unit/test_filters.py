"""
Unit tests for filter conditions and their nested-mapping serialization.
"""

import pytest

from headless_admin.endpoint.filters import (
    Comparison,
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
from headless_admin.exceptions import InvalidFilterError


class TestComparison:
    """Test comparison leaves."""

    def test_operator_coerced_from_string(self):
        """Test that string operators are converted to Operator members."""
        condition = Comparison("lang_id", "lt", 5)
        assert condition.operator is Operator.LT

    def test_unknown_operator_rejected(self):
        """Test that an unknown operator raises InvalidFilterError."""
        with pytest.raises(InvalidFilterError):
            Comparison("lang_id", "between", 5)

    def test_in_requires_list(self):
        """Test that in/nin require list values."""
        with pytest.raises(InvalidFilterError):
            Comparison("lang_id", Operator.IN, 1)
        with pytest.raises(InvalidFilterError):
            nin("lang_id", 1)

    def test_in_accepts_tuple(self):
        """Test that tuple values are stored as lists."""
        condition = Comparison("lang_id", Operator.IN, (1, 2))
        assert condition.value == [1, 2]

    def test_scalar_operator_rejects_list(self):
        """Test that scalar operators reject container values."""
        with pytest.raises(InvalidFilterError):
            eq("lang_id", [1, 2])

    def test_empty_field_rejected(self):
        """Test that an empty field name is rejected."""
        with pytest.raises(InvalidFilterError):
            eq("", 1)


class TestLogical:
    """Test logical nodes."""

    def test_requires_children(self):
        """Test that logical nodes need at least one child."""
        with pytest.raises(InvalidFilterError):
            and_()
        with pytest.raises(InvalidFilterError):
            Logical("or", [])

    def test_kind_coerced_from_string(self):
        """Test that logical kinds are converted from strings."""
        assert Logical("or", [eq("a", 1)]).kind is LogicalKind.OR

    def test_children_must_be_conditions(self):
        """Test that non-condition children are rejected."""
        with pytest.raises(InvalidFilterError):
            or_({"lang_id": 1})

    def test_only_and_can_be_implicit(self):
        """Test that implicit is limited to AND nodes."""
        with pytest.raises(InvalidFilterError):
            Logical(LogicalKind.OR, [eq("a", 1)], implicit=True)


class TestSerialization:
    """Test conversion to the nested filter mapping."""

    def test_eq_is_bare_shorthand(self):
        """Test that eq serializes as {field: value}."""
        assert to_filter_args(eq("lang_id", 1)) == {"lang_id": 1}

    @pytest.mark.parametrize("builder,op", [
        (neq, "neq"), (lt, "lt"), (gt, "gt"), (lte, "lte"), (gte, "gte"), (like, "like"),
    ])
    def test_operator_mapping(self, builder, op):
        """Test that non-eq operators nest under the field."""
        assert to_filter_args(builder("title", "x")) == {"title": {op: "x"}}

    def test_in_condition(self):
        """Test the in condition for two languages."""
        assert to_filter_args(in_("lang_id", [1, 2])) == {"lang_id": {"in": [1, 2]}}

    def test_or_condition(self):
        """Test two conditions connected as OR."""
        condition = or_(eq("lang_id", 1), gt("publication_date", 100))
        assert to_filter_args(condition) == {
            "or": [{"lang_id": 1}, {"publication_date": {"gt": 100}}]
        }

    def test_not_condition_serializes_as_list(self):
        """Test that not carries a list of children."""
        assert to_filter_args(not_(eq("is_deleted", 1))) == {"not": [{"is_deleted": 1}]}

    def test_implicit_and_merges_operators_on_one_field(self):
        """Test that lt and gt on the same field combine into one mapping."""
        condition = all_of(lt("publication_date", 100), gt("publication_date", 10))
        assert to_filter_args(condition) == {"publication_date": {"lt": 100, "gt": 10}}

    def test_implicit_and_merges_fields(self):
        """Test that comparisons on different fields combine into one mapping."""
        condition = all_of(eq("lang_id", 2), lt("publication_date", 100))
        assert to_filter_args(condition) == {"lang_id": 2, "publication_date": {"lt": 100}}

    def test_implicit_and_merges_eq_with_other_operator(self):
        """Test that an eq and another operator on one field become an operator mapping."""
        condition = all_of(eq("views", 5), lt("views", 10))
        assert to_filter_args(condition) == {"views": {"eq": 5, "lt": 10}}

    def test_implicit_and_falls_back_on_collision(self):
        """Test that colliding keys fall back to an explicit and list."""
        condition = all_of(gt("views", 5), gt("views", 10))
        assert to_filter_args(condition) == {"and": [{"views": {"gt": 5}}, {"views": {"gt": 10}}]}

    def test_deep_nesting(self):
        """Test that nesting depth is unrestricted."""
        condition = and_(or_(eq("a", 1), not_(or_(eq("b", 2), eq("c", 3)))))
        assert to_filter_args(condition) == {
            "and": [{"or": [{"a": 1}, {"not": [{"or": [{"b": 2}, {"c": 3}]}]}]}]
        }

    def test_none_serializes_as_null_literal(self):
        """Test that None is sent as the NULL literal instead of being dropped."""
        condition = and_(eq("lang_id", 1), eq("deleted_at", None), neq("published_at", None))
        assert to_filter_args(condition) == {
            "and": [{"lang_id": 1}, {"deleted_at": "NULL"}, {"published_at": {"neq": "NULL"}}]
        }

    def test_none_inside_list_serializes_as_null_literal(self):
        """Test NULL inside in lists and merged operator mappings."""
        assert to_filter_args(in_("parent_id", [1, None])) == {"parent_id": {"in": [1, "NULL"]}}
        condition = all_of(eq("views", None), lt("views", 10))
        assert to_filter_args(condition) == {"views": {"eq": "NULL", "lt": 10}}

    def test_raw_mapping_passes_through(self):
        """Test that raw mappings are handed on unchanged."""
        raw = {"title": {"ilike": "foo"}}
        assert to_filter_args(raw) == raw

    def test_invalid_type_rejected(self):
        """Test that non-filter values are rejected."""
        with pytest.raises(InvalidFilterError):
            to_filter_args("lang_id=1")


class TestParseFilter:
    """Test reconstruction of filter trees from nested mappings."""

    def test_round_trip_and_with_dual_operator_field(self):
        """Test that the and grouping and the dual-operator field survive a round trip."""
        args = {"and": [{"lang_id": 1}, {"publication_date": {"lt": 100, "gt": 10}}]}
        tree = parse_filter(args)

        assert tree == and_(
            eq("lang_id", 1),
            all_of(lt("publication_date", 100), gt("publication_date", 10)),
        )
        assert to_filter_args(tree) == args

    def test_bare_value_is_eq(self):
        """Test that a bare value parses as eq."""
        assert parse_filter({"lang_id": 1}) == eq("lang_id", 1)

    def test_bare_list_is_in(self):
        """Test that a bare list parses as in."""
        assert parse_filter({"lang_id": [1, 2]}) == in_("lang_id", [1, 2])

    def test_multiple_keys_become_implicit_and(self):
        """Test that a multi-key mapping becomes an AND of its entries."""
        args = {"lang_id": 2, "publication_date": {"lt": 100}}
        tree = parse_filter(args)
        assert isinstance(tree, Logical)
        assert tree.kind is LogicalKind.AND
        assert tree.implicit
        assert to_filter_args(tree) == args

    def test_or_round_trip(self):
        """Test an or list round trip."""
        args = {"or": [{"lang_id": 1}, {"publication_date": {"gt": 100}}]}
        assert to_filter_args(parse_filter(args)) == args

    def test_null_literal_parses_as_none(self):
        """Test that the NULL literal round-trips to None."""
        args = {"deleted_at": "NULL", "parent_id": {"in": [1, "NULL"]}}
        tree = parse_filter(args)
        assert tree == and_(eq("deleted_at", None), in_("parent_id", [1, None]))
        assert to_filter_args(tree) == args

    def test_not_accepts_single_mapping(self):
        """Test that not may wrap a single condition mapping."""
        assert parse_filter({"not": {"is_deleted": 1}}) == not_(eq("is_deleted", 1))

    def test_unknown_operator_rejected(self):
        """Test that unknown operators raise InvalidFilterError."""
        with pytest.raises(InvalidFilterError):
            parse_filter({"title": {"ilike": "foo"}})

    def test_empty_mapping_rejected(self):
        """Test that empty filters are rejected."""
        with pytest.raises(InvalidFilterError):
            parse_filter({})
        with pytest.raises(InvalidFilterError):
            parse_filter({"title": {}})

    def test_logical_requires_list(self):
        """Test that logical keys need a list or mapping."""
        with pytest.raises(InvalidFilterError):
            parse_filter({"or": 1})
