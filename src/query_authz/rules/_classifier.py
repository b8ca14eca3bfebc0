"""Type classifier — map a field's declared type to a value category."""

from __future__ import annotations

from query_authz import _types as t
from query_authz._types import FieldKind, ValueType
from query_authz.schema._model import FieldSchema

__all__ = ["classify", "is_json_value", "is_well_known"]

_NUMERIC_KINDS: frozenset[FieldKind] = frozenset(
    {
        FieldKind.DOUBLE,
        FieldKind.FLOAT,
        FieldKind.INT32,
        FieldKind.INT64,
        FieldKind.UINT32,
        FieldKind.UINT64,
        FieldKind.SINT32,
        FieldKind.SINT64,
        FieldKind.FIXED32,
        FieldKind.FIXED64,
        FieldKind.SFIXED32,
        FieldKind.SFIXED64,
    }
)

# Message types that behave like scalars in queries.
_WELL_KNOWN_TYPES: dict[str, ValueType] = {
    t.RESOURCE_IDENTIFIER: ValueType.STRING,
    t.TIMESTAMP: ValueType.STRING,
    t.UUID: ValueType.STRING,
    t.UUID_VALUE: ValueType.STRING,
    t.INET_VALUE: ValueType.STRING,
    t.STRING_VALUE: ValueType.STRING,
    t.JSON_VALUE: ValueType.STRING,
    t.DOUBLE_VALUE: ValueType.NUMBER,
    t.FLOAT_VALUE: ValueType.NUMBER,
    t.INT32_VALUE: ValueType.NUMBER,
    t.INT64_VALUE: ValueType.NUMBER,
    t.UINT32_VALUE: ValueType.NUMBER,
    t.UINT64_VALUE: ValueType.NUMBER,
    t.BOOL_VALUE: ValueType.BOOL,
}


def classify(field: FieldSchema) -> ValueType:
    """Return the value category of *field* based on its declared type.

    Strings and enums are ``STRING``, booleans ``BOOL`` and every integer
    or floating point kind ``NUMBER``. Well-known wrapper messages map to
    the category of the value they wrap. Anything else, including
    arbitrary nested messages, is ``DEFAULT``.

    Example::

        classify(FieldSchema("age", FieldKind.INT32))  # ValueType.NUMBER
        classify(FieldSchema("ts", FieldKind.MESSAGE, TIMESTAMP))  # ValueType.STRING
    """
    kind = field.kind
    if kind is FieldKind.STRING or kind is FieldKind.ENUM:
        return ValueType.STRING
    if kind is FieldKind.BOOL:
        return ValueType.BOOL
    if kind in _NUMERIC_KINDS:
        return ValueType.NUMBER
    if kind is FieldKind.MESSAGE and field.type_name is not None:
        return _WELL_KNOWN_TYPES.get(field.type_name, ValueType.DEFAULT)
    return ValueType.DEFAULT


def is_well_known(type_name: str | None) -> bool:
    """Return ``True`` if *type_name* is a scalar-like wrapper message."""
    return type_name in _WELL_KNOWN_TYPES


def is_json_value(field: FieldSchema) -> bool:
    """Return ``True`` if *field* holds a free-form JSON value (map-like paths)."""
    return field.type_name == t.JSON_VALUE
