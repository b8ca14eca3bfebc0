"""Exception hierarchy for query-authz."""

from __future__ import annotations

from query_authz._types import ValueType

__all__ = [
    "PolicyConflictError",
    "QueryAuthzError",
    "SchemaError",
    "UnsupportedFieldTypeError",
    "UnsupportedOperatorError",
]


class QueryAuthzError(Exception):
    """Base exception for all query-authz errors.

    Every subclass is raised at compile time and aborts resolution of the
    current schema unit. No partial policy tables are produced.
    """


class SchemaError(QueryAuthzError):
    """The schema graph cannot be resolved.

    Raised for type references that are not present in the schema
    registry and for malformed synthetic field declarations (missing
    name or missing annotation).

    Example::

        try:
            compile_policies(unit, schemas=registry)
        except SchemaError as exc:
            print(f"schema error: {exc}")
    """


class PolicyConflictError(QueryAuthzError):
    """A field declares both an allow list and a deny list.

    Attributes:
        field_name: The field carrying the conflicting annotation.
    """

    def __init__(self, *, field_name: str, message: str | None = None) -> None:
        self.field_name = field_name
        if message is None:
            message = f"{field_name}: both allow and deny options are not allowed"
        super().__init__(message)


class UnsupportedOperatorError(QueryAuthzError):
    """A listed operator is unknown or not eligible for the field's category.

    Attributes:
        field_name: The field carrying the annotation.
        operator: The offending operator name.
        value_type: The resolved category of the field.
    """

    def __init__(
        self,
        *,
        field_name: str,
        operator: str,
        value_type: ValueType,
        message: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.operator = operator
        self.value_type = value_type
        if message is None:
            message = (
                f"'{operator}' filtering operator is not supported for field "
                f"'{field_name}' of type {value_type.value}"
            )
        super().__init__(message)


class UnsupportedFieldTypeError(QueryAuthzError):
    """Filtering operators were requested on a field with no value category.

    Raised when an annotation lists concrete operators for a field whose
    type cannot be classified and which carries no value-type override.

    Attributes:
        field_name: The field carrying the annotation.
    """

    def __init__(self, *, field_name: str, message: str | None = None) -> None:
        self.field_name = field_name
        if message is None:
            message = (
                f"field '{field_name}' has no filterable value type; "
                f"set a value type override to restrict its operators"
            )
        super().__init__(message)
