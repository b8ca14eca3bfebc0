"""Shared enums, type aliases and well-known type names for query-authz."""

from __future__ import annotations

from enum import Enum
from typing import Union

__all__ = [
    "CAPABILITY_MARKERS",
    "Capability",
    "FieldKind",
    "FilterOperator",
    "OperatorLike",
    "ValueType",
]


class ValueType(str, Enum):
    """Abstract value category used for operator eligibility.

    ``DEFAULT`` means "no concrete category": the field either needs
    recursive resolution or cannot be filtered at all.
    """

    DEFAULT = "DEFAULT"
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOL = "BOOL"


class FilterOperator(str, Enum):
    """Filter operators that can be allowed or denied on a field.

    ``ALL`` is a sentinel: in a deny list it denies every operator, in an
    allow list it means "no restriction".
    """

    ALL = "ALL"
    EQ = "EQ"
    MATCH = "MATCH"
    GT = "GT"
    GE = "GE"
    LT = "LT"
    LE = "LE"
    IN = "IN"
    IEQ = "IEQ"


class Capability(str, Enum):
    """Query capability an endpoint may accept."""

    FILTERING = "filtering"
    SORTING = "sorting"
    FIELD_SELECTION = "field_selection"


class FieldKind(str, Enum):
    """Declared kind of a schema field."""

    DOUBLE = "double"
    FLOAT = "float"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    SINT32 = "sint32"
    SINT64 = "sint64"
    FIXED32 = "fixed32"
    FIXED64 = "fixed64"
    SFIXED32 = "sfixed32"
    SFIXED64 = "sfixed64"
    BOOL = "bool"
    STRING = "string"
    BYTES = "bytes"
    ENUM = "enum"
    MESSAGE = "message"
    GROUP = "group"


# Operators may be given as enum members or by name in annotations.
OperatorLike = Union[FilterOperator, str]

# Request field types whose presence declares an endpoint capability.
CAPABILITY_MARKERS: dict[Capability, str] = {
    Capability.FILTERING: ".infoblox.api.Filtering",
    Capability.SORTING: ".infoblox.api.Sorting",
    Capability.FIELD_SELECTION: ".infoblox.api.FieldSelection",
}

TIMESTAMP = ".google.protobuf.Timestamp"
UUID = ".gorm.types.UUID"
UUID_VALUE = ".gorm.types.UUIDValue"
RESOURCE_IDENTIFIER = ".atlas.rpc.Identifier"
INET_VALUE = ".gorm.types.InetValue"
JSON_VALUE = ".gorm.types.JSONValue"
STRING_VALUE = ".google.protobuf.StringValue"
DOUBLE_VALUE = ".google.protobuf.DoubleValue"
FLOAT_VALUE = ".google.protobuf.FloatValue"
INT32_VALUE = ".google.protobuf.Int32Value"
INT64_VALUE = ".google.protobuf.Int64Value"
UINT32_VALUE = ".google.protobuf.UInt32Value"
UINT64_VALUE = ".google.protobuf.UInt64Value"
BOOL_VALUE = ".google.protobuf.BoolValue"
