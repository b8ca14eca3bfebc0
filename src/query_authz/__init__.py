"""query-authz — compile-time query authorization policies for schema-described APIs.

Derives, for every exposed endpoint, which filter operators are permitted
on which result fields, which fields may be sorted on and which fields may
be selected, from declarative annotations on a message schema graph.

Example::

    from query_authz import SchemaRegistry, compile_policies

    registry = SchemaRegistry(messages)
    tables = compile_policies(unit, schemas=registry)
    tables.filtering["/pkg.Users/List"]["status"].deny
"""

from importlib.metadata import PackageNotFoundError, version

from query_authz._types import Capability, FieldKind, FilterOperator, ValueType
from query_authz.config._config import PolicyConfig, configure
from query_authz.exceptions import (
    PolicyConflictError,
    QueryAuthzError,
    SchemaError,
    UnsupportedFieldTypeError,
    UnsupportedOperatorError,
)
from query_authz.explain._endpoint import explain_endpoint
from query_authz.policy._aggregator import compile_policies, resolve_endpoint
from query_authz.policy._models import EndpointPolicy, PolicyTables
from query_authz.resolver._models import ResolvedFieldPolicy
from query_authz.resolver._resolver import resolve_rules
from query_authz.schema._model import (
    Annotation,
    EndpointDescriptor,
    FieldSchema,
    MessageSchema,
    MethodSchema,
    SchemaUnit,
    ServiceSchema,
    SyntheticField,
)
from query_authz.schema._registry import SchemaRegistry

try:
    __version__ = version("query-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "Annotation",
    "Capability",
    "EndpointDescriptor",
    "EndpointPolicy",
    "FieldKind",
    "FieldSchema",
    "FilterOperator",
    "MessageSchema",
    "MethodSchema",
    "PolicyConfig",
    "PolicyConflictError",
    "PolicyTables",
    "QueryAuthzError",
    "ResolvedFieldPolicy",
    "SchemaError",
    "SchemaRegistry",
    "SchemaUnit",
    "ServiceSchema",
    "SyntheticField",
    "UnsupportedFieldTypeError",
    "UnsupportedOperatorError",
    "ValueType",
    "compile_policies",
    "configure",
    "explain_endpoint",
    "resolve_endpoint",
    "resolve_rules",
]
