"""resolve_rules() — recursive rule resolution over nested message schemas."""

from __future__ import annotations

from dataclasses import dataclass

from query_authz._types import Capability, FieldKind, FilterOperator, ValueType
from query_authz.config._config import PolicyConfig, get_global_config
from query_authz.exceptions import SchemaError
from query_authz.resolver._models import ResolvedFieldPolicy
from query_authz.resolver._nesting import allow_nested, nesting_depth
from query_authz.rules._classifier import classify, is_json_value
from query_authz.rules._defaults import effective_annotation
from query_authz.rules._operators import check_annotation, resolve_deny_rules
from query_authz.schema._model import Annotation, FieldSchema, MessageSchema
from query_authz.schema._registry import SchemaRegistry

__all__ = ["resolve_rules"]

_DENY_ALL: tuple[FilterOperator, ...] = (FilterOperator.ALL,)


@dataclass(frozen=True, slots=True)
class _Pass:
    """Read-only state shared by every level of one resolution."""

    capability: Capability
    schemas: SchemaRegistry
    config: PolicyConfig


def resolve_rules(
    message: MessageSchema,
    capability: Capability,
    *,
    schemas: SchemaRegistry,
    config: PolicyConfig | None = None,
    depth: int | None = None,
) -> list[ResolvedFieldPolicy]:
    """Resolve the policy entries of *message* for one capability.

    Message-level synthetic fields are processed first, then the real
    fields in declaration order. Nested message fields are expanded into
    dotted paths while the depth budget allows and nesting is permitted.

    For ``SORTING`` and ``FIELD_SELECTION`` only the ``path`` of each
    entry is meaningful.

    Args:
        message: The message to resolve (usually an endpoint's result message).
        capability: Which table to build.
        schemas: Registry used to resolve nested and synthetic type references.
        config: Optional config. Defaults to the global config.
        depth: Optional depth budget. Defaults to the message override or
            the configured default. Clamped to at least 1.

    Returns:
        Resolved entries in deterministic order.

    Raises:
        SchemaError: A referenced message is missing or a synthetic field
            declaration is malformed.
        PolicyConflictError: A field declares both allow and deny lists,
            whatever the capability.
        UnsupportedOperatorError: A listed operator is unknown, or not
            eligible for a filtered field.
        UnsupportedFieldTypeError: Operators listed on an uncategorizable field.

    Example::

        entries = resolve_rules(user_msg, Capability.FILTERING, schemas=registry)
        {e.path: e.deny for e in entries}
    """
    cfg = config if config is not None else get_global_config()
    budget = nesting_depth(message, cfg) if depth is None else max(depth, 1)
    state = _Pass(capability=capability, schemas=schemas, config=cfg)
    return _resolve_message(message, budget, state)


def _resolve_message(
    message: MessageSchema, budget: int, state: _Pass
) -> list[ResolvedFieldPolicy]:
    data: list[ResolvedFieldPolicy] = []
    fields: list[tuple[FieldSchema, Annotation]] = []
    shadowed: set[str] = set()

    for synthetic in message.synthetic_fields:
        if not synthetic.name:
            raise SchemaError(f"empty synthetic validate option for message {message.name}")
        if synthetic.annotation is None:
            raise SchemaError(
                f"empty synthetic validate option for field {message.name}.{synthetic.name}"
            )
        opts = effective_annotation(synthetic.annotation, synthetic=True)
        if opts.target_message:
            fields.append((_materialize(synthetic.name, opts, state), opts))
            shadowed.add(synthetic.name)
            continue
        entry = _resolve_synthetic(synthetic.name, opts, state.capability)
        if entry is not None:
            data.append(entry)
            # A hidden synthetic leaves the real field of the same name visible.
            shadowed.add(synthetic.name)

    for field in message.fields:
        if field.name in shadowed:
            continue
        opts = effective_annotation(field.annotation)
        if opts.target_message:
            field = _materialize(field.name, opts, state)
        fields.append((field, opts))

    for field, opts in fields:
        data.extend(_resolve_field(message, field, opts, budget, state))
    return data


def _materialize(name: str, opts: Annotation, state: _Pass) -> FieldSchema:
    """Turn a field redirected to a target message into a virtual message field."""
    target = state.schemas.get(opts.target_message)
    return FieldSchema(name=name, kind=FieldKind.MESSAGE, type_name=target.name, annotation=opts)


def _resolve_synthetic(
    name: str, opts: Annotation, capability: Capability
) -> ResolvedFieldPolicy | None:
    check_annotation(name, opts.allow, opts.deny, opts.value_type)
    if capability is Capability.FILTERING:
        deny = resolve_deny_rules(name, opts.allow, opts.deny, opts.value_type)
        return ResolvedFieldPolicy(name, opts.value_type, deny)
    if _is_disabled(opts, capability):
        return None
    return ResolvedFieldPolicy(name, opts.value_type)


def _is_disabled(opts: Annotation, capability: Capability) -> bool:
    if capability is Capability.SORTING:
        return bool(opts.sorting_disabled)
    if capability is Capability.FIELD_SELECTION:
        return bool(opts.field_selection_disabled)
    return False


def _resolve_field(
    message: MessageSchema,
    field: FieldSchema,
    opts: Annotation,
    budget: int,
    state: _Pass,
) -> list[ResolvedFieldPolicy]:
    capability = state.capability
    check_annotation(field.name, opts.allow, opts.deny, opts.value_type)
    if _is_disabled(opts, capability):
        return []

    name = field.name
    filtering = capability is Capability.FILTERING
    path = f"{name}.*" if filtering and is_json_value(field) else name

    value_type = opts.value_type
    if value_type is ValueType.DEFAULT and field.repeated:
        if filtering:
            return [ResolvedFieldPolicy(path, ValueType.DEFAULT, _DENY_ALL)]
        if capability is Capability.SORTING:
            return []

    if value_type is ValueType.DEFAULT:
        value_type = classify(field)

    if value_type is not ValueType.DEFAULT:
        if filtering:
            deny = resolve_deny_rules(path, opts.allow, opts.deny, value_type)
            return [ResolvedFieldPolicy(path, value_type, deny)]
        return [ResolvedFieldPolicy(path, value_type)]

    if budget <= 1:
        if state.config.log_resolution_decisions:
            from query_authz._audit import log_depth_exhausted

            log_depth_exhausted(message=message.name, field=name, capability=capability)
        return []

    if field.is_message and allow_nested(message, opts, state.config):
        nested = state.schemas.get(field.type_name)
        entries = _resolve_message(nested, budget - 1, state)
        if opts.nested_fields:
            entries = [e for e in entries if _head(e.path) in opts.nested_fields]
        return [e.reparent(name) for e in entries]

    if filtering:
        # Operators cannot be restricted on a field without a category.
        resolve_deny_rules(name, opts.allow, opts.deny, ValueType.DEFAULT)
        return [ResolvedFieldPolicy(path, ValueType.DEFAULT, _DENY_ALL)]
    return [ResolvedFieldPolicy(path)]


def _head(path: str) -> str:
    return path.split(".", 1)[0]
