"""Immutable schema model — messages, fields, annotations and endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from query_authz._types import FieldKind, OperatorLike, ValueType

__all__ = [
    "Annotation",
    "EndpointDescriptor",
    "FieldSchema",
    "MessageSchema",
    "MethodSchema",
    "SchemaUnit",
    "ServiceSchema",
    "SyntheticField",
]


def _as_tuple(values: Iterable[object] | None) -> tuple[object, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class Annotation:
    """Query-validation options attached to a field or synthetic field.

    Unset tri-state flags (``None``) are resolved by
    :func:`~query_authz.rules.effective_annotation`; the annotation itself
    is never mutated.

    Attributes:
        value_type: Category override. ``ValueType.DEFAULT`` means none.
        allow: Operators allowed for filtering (mutually exclusive with ``deny``).
        deny: Operators denied for filtering.
        sorting_disabled: Exclude the field from sorting.
        field_selection_disabled: Exclude the field from field selection.
        enable_nested_fields: Permit recursion into the field's message.
        nested_fields: Names of nested fields exposed through this field.
        target_message: Qualified name of a message the field is resolved as.

    Example::

        Annotation(allow=["EQ", "IN"])
        Annotation(value_type=ValueType.NUMBER, deny=[FilterOperator.MATCH])
    """

    value_type: ValueType = ValueType.DEFAULT
    allow: tuple[OperatorLike, ...] = ()
    deny: tuple[OperatorLike, ...] = ()
    sorting_disabled: bool | None = None
    field_selection_disabled: bool | None = None
    enable_nested_fields: bool = False
    nested_fields: tuple[str, ...] = ()
    target_message: str | None = None

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the instance hashable.
        object.__setattr__(self, "allow", _as_tuple(self.allow))
        object.__setattr__(self, "deny", _as_tuple(self.deny))
        object.__setattr__(self, "nested_fields", _as_tuple(self.nested_fields))
        object.__setattr__(self, "value_type", ValueType(self.value_type))


@dataclass(frozen=True, slots=True)
class FieldSchema:
    """A single field of a message.

    Attributes:
        name: Field name as it appears in query paths.
        kind: Declared kind of the field.
        type_name: Qualified name of the referenced message or enum type.
        repeated: Whether the field is a list.
        annotation: Optional query-validation options.
    """

    name: str
    kind: FieldKind
    type_name: str | None = None
    repeated: bool = False
    annotation: Annotation | None = None

    @property
    def is_message(self) -> bool:
        return self.kind is FieldKind.MESSAGE


@dataclass(frozen=True, slots=True)
class SyntheticField:
    """A virtual field declared at message level.

    Attributes:
        name: Path segment the synthetic field is addressed by.
        annotation: Options for the field. Required.
    """

    name: str
    annotation: Annotation | None


@dataclass(frozen=True, slots=True)
class MessageSchema:
    """A message type with its ordered fields and message-level directives.

    Attributes:
        name: Qualified name (e.g. ``".pkg.User"``).
        fields: Fields in declaration order.
        synthetic_fields: Virtual fields, resolved before real fields.
        nesting_depth: Optional nesting depth override for this message.
        enable_nested_fields: Permit recursion into every nested field.
    """

    name: str
    fields: tuple[FieldSchema, ...] = ()
    synthetic_fields: tuple[SyntheticField, ...] = ()
    nesting_depth: int | None = None
    enable_nested_fields: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "synthetic_fields", tuple(self.synthetic_fields))

    def field(self, name: str) -> FieldSchema | None:
        """Return the real field called *name*, or ``None``."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """An exposed operation with its request and response messages.

    Attributes:
        identifier: Opaque endpoint identifier (``"/pkg.Service/Method"``).
        request: The request message schema.
        response: The response message schema.
    """

    identifier: str
    request: MessageSchema
    response: MessageSchema

    @classmethod
    def for_method(
        cls,
        package: str,
        service: str,
        method: str,
        request: MessageSchema,
        response: MessageSchema,
    ) -> EndpointDescriptor:
        """Build a descriptor using the ``/package.Service/Method`` identifier form.

        Example::

            EndpointDescriptor.for_method("pkg", "Users", "List", req, resp)
            # identifier == "/pkg.Users/List"
        """
        qualified = f"{package}.{service}" if package else service
        return cls(identifier=f"/{qualified}/{method}", request=request, response=response)


@dataclass(frozen=True, slots=True)
class MethodSchema:
    """A service method naming its request and response message types."""

    name: str
    input_type: str
    output_type: str


@dataclass(frozen=True, slots=True)
class ServiceSchema:
    """A service and its methods in declaration order."""

    name: str
    methods: tuple[MethodSchema, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", tuple(self.methods))


@dataclass(frozen=True, slots=True)
class SchemaUnit:
    """One compiled schema file: a package and the services it declares.

    A unit is compiled as a whole. An error anywhere in it aborts the
    compilation of the unit.
    """

    name: str
    package: str = ""
    services: tuple[ServiceSchema, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "services", tuple(self.services))
