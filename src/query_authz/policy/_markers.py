"""Capability markers and result message lookup."""

from __future__ import annotations

from query_authz._types import CAPABILITY_MARKERS, Capability
from query_authz.schema._model import MessageSchema
from query_authz.schema._registry import SchemaRegistry

__all__ = ["RESULT_FIELD_NAMES", "enabled_capabilities", "find_result_message", "has_capability"]

RESULT_FIELD_NAMES: frozenset[str] = frozenset({"result", "results"})


def has_capability(request: MessageSchema, capability: Capability) -> bool:
    """Return ``True`` if *request* has a field typed with the capability's marker."""
    marker = CAPABILITY_MARKERS[capability]
    return any(f.type_name == marker for f in request.fields)


def enabled_capabilities(request: MessageSchema) -> tuple[Capability, ...]:
    """Return the capabilities declared by *request*, in ``Capability`` order."""
    return tuple(c for c in Capability if has_capability(request, c))


def find_result_message(
    response: MessageSchema, *, schemas: SchemaRegistry
) -> MessageSchema | None:
    """Locate the message holding an endpoint's results.

    The first message field named ``result`` or ``results`` wins.

    Returns:
        The referenced message schema, or ``None`` when the response has
        no such field.

    Raises:
        SchemaError: The field references a message that is not registered.
    """
    for field in response.fields:
        if field.name in RESULT_FIELD_NAMES and field.is_message:
            return schemas.get(field.type_name)
    return None
