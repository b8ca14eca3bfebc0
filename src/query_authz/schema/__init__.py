"""Schema model — immutable messages, fields, annotations and endpoints."""

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

__all__ = [
    "Annotation",
    "EndpointDescriptor",
    "FieldSchema",
    "MessageSchema",
    "MethodSchema",
    "SchemaRegistry",
    "SchemaUnit",
    "ServiceSchema",
    "SyntheticField",
]
