"""Tests for rules/_operators.py — eligibility table and allow/deny resolution."""

from __future__ import annotations

import pytest

from query_authz._types import FilterOperator as Op
from query_authz._types import ValueType
from query_authz.exceptions import (
    PolicyConflictError,
    UnsupportedFieldTypeError,
    UnsupportedOperatorError,
)
from query_authz.rules._operators import (
    check_annotation,
    eligible_operators,
    parse_operator,
    resolve_deny_rules,
)


class TestEligibleOperators:
    def test_number(self) -> None:
        assert eligible_operators(ValueType.NUMBER) == (Op.EQ, Op.GT, Op.GE, Op.LT, Op.LE, Op.IN)

    def test_string(self) -> None:
        assert eligible_operators(ValueType.STRING) == (
            Op.EQ,
            Op.MATCH,
            Op.GT,
            Op.GE,
            Op.LT,
            Op.LE,
            Op.IN,
            Op.IEQ,
        )

    def test_bool(self) -> None:
        assert eligible_operators(ValueType.BOOL) == (Op.EQ, Op.IN)

    def test_default_has_none(self) -> None:
        assert eligible_operators(ValueType.DEFAULT) == ()


class TestParseOperator:
    def test_enum_member_passthrough(self) -> None:
        assert parse_operator(Op.EQ, field_name="f", value_type=ValueType.STRING) is Op.EQ

    def test_name(self) -> None:
        assert parse_operator("IEQ", field_name="f", value_type=ValueType.STRING) is Op.IEQ

    def test_unknown_name(self) -> None:
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            parse_operator("LIKE", field_name="title", value_type=ValueType.STRING)
        assert exc_info.value.operator == "LIKE"
        assert exc_info.value.field_name == "title"


class TestCheckAnnotation:
    """Only list shape and operator names are checked, never eligibility."""

    def test_empty_lists(self) -> None:
        check_annotation("f", (), ())

    def test_conflict(self) -> None:
        with pytest.raises(PolicyConflictError) as exc_info:
            check_annotation("status", ["EQ"], ["IN"])
        assert exc_info.value.field_name == "status"

    @pytest.mark.parametrize(("allow", "deny"), [(["EQ", "BOGUS"], []), ([], ["BOGUS"])])
    def test_unknown_name(self, allow, deny) -> None:
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            check_annotation("f", allow, deny)
        assert exc_info.value.operator == "BOGUS"

    def test_ineligible_operator_accepted(self) -> None:
        check_annotation("blob", ["MATCH"], [])


class TestResolveDenyRules:
    """Allow lists become complements, deny lists stay verbatim."""

    def test_no_lists_means_no_restriction(self) -> None:
        assert resolve_deny_rules("f", [], [], ValueType.STRING) == ()

    def test_both_lists_conflict(self) -> None:
        with pytest.raises(PolicyConflictError) as exc_info:
            resolve_deny_rules("status", ["EQ"], ["MATCH"], ValueType.STRING)
        assert exc_info.value.field_name == "status"
        assert "both allow and deny" in str(exc_info.value)

    def test_conflict_checked_before_operator_validity(self) -> None:
        with pytest.raises(PolicyConflictError):
            resolve_deny_rules("f", ["BOGUS"], ["ALSO_BOGUS"], ValueType.STRING)

    def test_allow_eq_on_string(self) -> None:
        deny = resolve_deny_rules("f", ["EQ"], [], ValueType.STRING)
        assert deny == (Op.MATCH, Op.GT, Op.GE, Op.LT, Op.LE, Op.IN, Op.IEQ)

    def test_allow_eq_in_on_enum_status(self) -> None:
        deny = resolve_deny_rules("status", [Op.EQ, Op.IN], [], ValueType.STRING)
        assert deny == (Op.MATCH, Op.GT, Op.GE, Op.LT, Op.LE, Op.IEQ)

    def test_allow_everything_eligible_denies_nothing(self) -> None:
        deny = resolve_deny_rules("f", ["EQ", "IN"], [], ValueType.BOOL)
        assert deny == ()

    def test_allow_all_collapses_to_no_restriction(self) -> None:
        assert resolve_deny_rules("f", ["EQ", "ALL"], [], ValueType.NUMBER) == ()

    def test_deny_kept_verbatim(self) -> None:
        deny = resolve_deny_rules("f", [], ["LT", "GT"], ValueType.NUMBER)
        assert deny == (Op.LT, Op.GT)

    def test_deny_duplicates_dropped(self) -> None:
        deny = resolve_deny_rules("f", [], ["GT", "GT"], ValueType.NUMBER)
        assert deny == (Op.GT,)

    @pytest.mark.parametrize(
        "value_type",
        [ValueType.STRING, ValueType.NUMBER, ValueType.BOOL, ValueType.DEFAULT],
    )
    def test_deny_all_any_category(self, value_type) -> None:
        assert resolve_deny_rules("f", [], ["ALL"], value_type) == (Op.ALL,)

    def test_deny_all_mixed_with_others(self) -> None:
        assert resolve_deny_rules("f", [], ["EQ", "ALL"], ValueType.STRING) == (Op.ALL,)

    @pytest.mark.parametrize("op", ["MATCH", "IEQ"])
    def test_string_only_operators_rejected_for_number(self, op) -> None:
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            resolve_deny_rules("age", [], [op], ValueType.NUMBER)
        assert exc_info.value.value_type is ValueType.NUMBER
        assert op in str(exc_info.value)

    def test_range_operator_rejected_for_bool(self) -> None:
        with pytest.raises(UnsupportedOperatorError):
            resolve_deny_rules("active", ["GT"], [], ValueType.BOOL)

    def test_unknown_operator_name(self) -> None:
        with pytest.raises(UnsupportedOperatorError):
            resolve_deny_rules("f", ["NEAR"], [], ValueType.STRING)

    def test_concrete_operator_on_default_category(self) -> None:
        with pytest.raises(UnsupportedFieldTypeError) as exc_info:
            resolve_deny_rules("blob", ["EQ"], [], ValueType.DEFAULT)
        assert exc_info.value.field_name == "blob"

    def test_allow_all_on_default_category_is_accepted(self) -> None:
        assert resolve_deny_rules("blob", ["ALL"], [], ValueType.DEFAULT) == ()
