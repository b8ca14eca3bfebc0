"""Shared test fixtures for query-authz tests."""

from __future__ import annotations

import pytest

from query_authz._types import (
    CAPABILITY_MARKERS,
    JSON_VALUE,
    TIMESTAMP,
    Capability,
    FieldKind,
    FilterOperator,
    ValueType,
)
from query_authz.config._config import PolicyConfig, _reset_global_config
from query_authz.schema._model import (
    Annotation,
    FieldSchema,
    MessageSchema,
    MethodSchema,
    SchemaUnit,
    ServiceSchema,
    SyntheticField,
)
from query_authz.schema._registry import SchemaRegistry

# ---------------------------------------------------------------------------
# Example schema graph
# ---------------------------------------------------------------------------

GEO = MessageSchema(
    name=".example.Geo",
    fields=(
        FieldSchema("lat", FieldKind.DOUBLE),
        FieldSchema("lng", FieldKind.DOUBLE),
    ),
)

ADDRESS = MessageSchema(
    name=".example.Address",
    fields=(
        FieldSchema("city", FieldKind.STRING),
        FieldSchema("zip", FieldKind.STRING, annotation=Annotation(sorting_disabled=True)),
        FieldSchema(
            "geo",
            FieldKind.MESSAGE,
            GEO.name,
            annotation=Annotation(enable_nested_fields=True),
        ),
    ),
)

USER = MessageSchema(
    name=".example.User",
    fields=(
        FieldSchema("id", FieldKind.INT64),
        FieldSchema(
            "name",
            FieldKind.STRING,
            annotation=Annotation(allow=[FilterOperator.EQ, FilterOperator.IEQ]),
        ),
        FieldSchema(
            "status",
            FieldKind.ENUM,
            ".example.Status",
            annotation=Annotation(allow=["EQ", "IN"]),
        ),
        FieldSchema("age", FieldKind.INT32, annotation=Annotation(deny=["GT"])),
        FieldSchema("active", FieldKind.BOOL),
        FieldSchema("created_at", FieldKind.MESSAGE, TIMESTAMP),
        FieldSchema("attrs", FieldKind.MESSAGE, JSON_VALUE),
        FieldSchema("tags", FieldKind.STRING, repeated=True),
        FieldSchema(
            "address",
            FieldKind.MESSAGE,
            ADDRESS.name,
            annotation=Annotation(enable_nested_fields=True),
        ),
        FieldSchema("manager", FieldKind.MESSAGE, ".example.User"),
        FieldSchema("secret", FieldKind.BYTES),
    ),
)

LIST_USERS_REQUEST = MessageSchema(
    name=".example.ListUsersRequest",
    fields=(
        FieldSchema("filter", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.FILTERING]),
        FieldSchema("order_by", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.SORTING]),
        FieldSchema("fields", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.FIELD_SELECTION]),
    ),
)

LIST_USERS_RESPONSE = MessageSchema(
    name=".example.ListUsersResponse",
    fields=(FieldSchema("results", FieldKind.MESSAGE, USER.name, repeated=True),),
)

READ_USER_REQUEST = MessageSchema(
    name=".example.ReadUserRequest",
    fields=(
        FieldSchema("id", FieldKind.INT64),
        FieldSchema("fields", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.FIELD_SELECTION]),
    ),
)

READ_USER_RESPONSE = MessageSchema(
    name=".example.ReadUserResponse",
    fields=(FieldSchema("result", FieldKind.MESSAGE, USER.name),),
)

PING_REQUEST = MessageSchema(
    name=".example.PingRequest",
    fields=(
        FieldSchema("filter", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.FILTERING]),
        FieldSchema("order_by", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.SORTING]),
        FieldSchema("fields", FieldKind.MESSAGE, CAPABILITY_MARKERS[Capability.FIELD_SELECTION]),
    ),
)

PING_RESPONSE = MessageSchema(
    name=".example.PingResponse",
    fields=(FieldSchema("status", FieldKind.STRING),),
)

LABEL = MessageSchema(
    name=".example.Label",
    fields=(
        FieldSchema("key", FieldKind.STRING),
        FieldSchema("value", FieldKind.STRING),
    ),
)

TAGGED = MessageSchema(
    name=".example.Tagged",
    synthetic_fields=(
        SyntheticField(
            "full_name",
            Annotation(value_type=ValueType.STRING, allow=["EQ", "MATCH"]),
        ),
        SyntheticField(
            "labels",
            Annotation(target_message=LABEL.name, nested_fields=["key"]),
        ),
    ),
    fields=(
        FieldSchema("id", FieldKind.INT64),
        FieldSchema("full_name", FieldKind.BYTES),
    ),
)

USERS_UNIT = SchemaUnit(
    name="example/users.proto",
    package="example",
    services=(
        ServiceSchema(
            "Users",
            methods=(
                MethodSchema("List", LIST_USERS_REQUEST.name, LIST_USERS_RESPONSE.name),
                MethodSchema("Read", READ_USER_REQUEST.name, READ_USER_RESPONSE.name),
                MethodSchema("Ping", PING_REQUEST.name, PING_RESPONSE.name),
            ),
        ),
    ),
)

ALL_MESSAGES = (
    GEO,
    ADDRESS,
    USER,
    LIST_USERS_REQUEST,
    LIST_USERS_RESPONSE,
    READ_USER_REQUEST,
    READ_USER_RESPONSE,
    PING_REQUEST,
    PING_RESPONSE,
    LABEL,
    TAGGED,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config():
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def registry() -> SchemaRegistry:
    return SchemaRegistry(ALL_MESSAGES)


@pytest.fixture()
def config() -> PolicyConfig:
    return PolicyConfig()


@pytest.fixture()
def users_unit() -> SchemaUnit:
    return USERS_UNIT


@pytest.fixture()
def user_message() -> MessageSchema:
    return USER


@pytest.fixture()
def tagged_message() -> MessageSchema:
    return TAGGED
