"""Operator eligibility and allow/deny list resolution."""

from __future__ import annotations

from collections.abc import Sequence

from query_authz._types import FilterOperator, OperatorLike, ValueType
from query_authz.exceptions import (
    PolicyConflictError,
    UnsupportedFieldTypeError,
    UnsupportedOperatorError,
)

__all__ = ["check_annotation", "eligible_operators", "parse_operator", "resolve_deny_rules"]

_ELIGIBLE: dict[ValueType, tuple[FilterOperator, ...]] = {
    ValueType.NUMBER: (
        FilterOperator.EQ,
        FilterOperator.GT,
        FilterOperator.GE,
        FilterOperator.LT,
        FilterOperator.LE,
        FilterOperator.IN,
    ),
    ValueType.STRING: (
        FilterOperator.EQ,
        FilterOperator.MATCH,
        FilterOperator.GT,
        FilterOperator.GE,
        FilterOperator.LT,
        FilterOperator.LE,
        FilterOperator.IN,
        FilterOperator.IEQ,
    ),
    ValueType.BOOL: (
        FilterOperator.EQ,
        FilterOperator.IN,
    ),
}


def eligible_operators(value_type: ValueType) -> tuple[FilterOperator, ...]:
    """Return the operators supported for *value_type*, in canonical order.

    ``DEFAULT`` supports no operator.
    """
    return _ELIGIBLE.get(value_type, ())


def parse_operator(
    op: OperatorLike, *, field_name: str, value_type: ValueType
) -> FilterOperator:
    """Convert an operator name to a :class:`FilterOperator`.

    Raises:
        UnsupportedOperatorError: If *op* does not name a known operator.
    """
    if isinstance(op, FilterOperator):
        return op
    try:
        return FilterOperator(op)
    except ValueError:
        raise UnsupportedOperatorError(
            field_name=field_name, operator=str(op), value_type=value_type
        ) from None


def check_annotation(
    field_name: str,
    allow: Sequence[OperatorLike],
    deny: Sequence[OperatorLike],
    value_type: ValueType = ValueType.DEFAULT,
) -> None:
    """Reject an allow/deny pair that can never be valid, whatever the capability.

    Checks that at most one list is given and that every entry names a
    known operator. Eligibility for the field category is left to
    :func:`resolve_deny_rules`.

    Raises:
        PolicyConflictError: Both lists are non-empty.
        UnsupportedOperatorError: An entry does not name a known operator.
    """
    if allow and deny:
        raise PolicyConflictError(field_name=field_name)
    for item in (*allow, *deny):
        parse_operator(item, field_name=field_name, value_type=value_type)


def resolve_deny_rules(
    field_name: str,
    allow: Sequence[OperatorLike],
    deny: Sequence[OperatorLike],
    value_type: ValueType,
) -> tuple[FilterOperator, ...]:
    """Compute the effective denied-operator set for a field.

    An allow list is turned into its complement within the category's
    eligible operators; ``ALL`` in an allow list lifts every restriction.
    A deny list is kept verbatim; ``ALL`` in a deny list collapses it to
    ``(ALL,)``.

    Args:
        field_name: Field path, used in error messages.
        allow: Allowed operators (names or enum members).
        deny: Denied operators (names or enum members).
        value_type: The resolved category of the field.

    Returns:
        The denied operators. An empty tuple means no restriction.

    Raises:
        PolicyConflictError: Both lists are non-empty.
        UnsupportedOperatorError: An operator is unknown or not eligible.
        UnsupportedFieldTypeError: A concrete operator is listed for a
            ``DEFAULT`` category field.

    Example::

        resolve_deny_rules("status", ["EQ", "IN"], [], ValueType.STRING)
        # (MATCH, GT, GE, LT, LE, IEQ)
    """
    if allow and deny:
        raise PolicyConflictError(field_name=field_name)
    if not allow and not deny:
        return ()

    supported = eligible_operators(value_type)
    listed = allow or deny
    ops: list[FilterOperator] = []
    for item in listed:
        op = parse_operator(item, field_name=field_name, value_type=value_type)
        if op is not FilterOperator.ALL and op not in supported:
            if value_type is ValueType.DEFAULT:
                raise UnsupportedFieldTypeError(field_name=field_name)
            raise UnsupportedOperatorError(
                field_name=field_name, operator=op.value, value_type=value_type
            )
        if op not in ops:
            ops.append(op)

    if FilterOperator.ALL in ops:
        return () if allow else (FilterOperator.ALL,)
    if allow:
        return tuple(op for op in supported if op not in ops)
    return tuple(ops)
