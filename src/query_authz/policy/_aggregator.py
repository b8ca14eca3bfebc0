"""Endpoint policy aggregation — resolve every capability of every endpoint."""

from __future__ import annotations

from collections.abc import Iterable

from query_authz._types import Capability
from query_authz.config._config import PolicyConfig, get_global_config
from query_authz.policy._markers import enabled_capabilities, find_result_message
from query_authz.policy._models import EndpointPolicy, PolicyTables
from query_authz.resolver._models import ResolvedFieldPolicy
from query_authz.resolver._resolver import resolve_rules
from query_authz.schema._model import EndpointDescriptor, SchemaUnit
from query_authz.schema._registry import SchemaRegistry

__all__ = ["compile_policies", "iter_endpoints", "resolve_endpoint"]


def resolve_endpoint(
    endpoint: EndpointDescriptor,
    *,
    schemas: SchemaRegistry,
    config: PolicyConfig | None = None,
) -> EndpointPolicy:
    """Resolve the filtering, sorting and field-selection tables of one endpoint.

    A capability gets a table only if the request declares its marker and
    the response has a ``result``/``results`` message field. The resolver
    runs once per enabled capability against the result message.

    Args:
        endpoint: The endpoint to resolve.
        schemas: Registry used to resolve type references.
        config: Optional config. Defaults to the global config.

    Returns:
        An ``EndpointPolicy``. Tables for absent capabilities are ``None``.

    Example::

        policy = resolve_endpoint(endpoint, schemas=registry)
        if policy.filtering is not None:
            print(sorted(policy.filtering))
    """
    cfg = config if config is not None else get_global_config()
    capabilities = enabled_capabilities(endpoint.request)
    if not capabilities:
        return EndpointPolicy(endpoint=endpoint.identifier)

    result = find_result_message(endpoint.response, schemas=schemas)
    if result is None:
        if cfg.log_resolution_decisions:
            from query_authz._audit import log_missing_result

            log_missing_result(endpoint=endpoint.identifier, capabilities=capabilities)
        return EndpointPolicy(endpoint=endpoint.identifier)

    resolved: dict[Capability, list[ResolvedFieldPolicy]] = {}
    for capability in capabilities:
        entries = resolve_rules(result, capability, schemas=schemas, config=cfg)
        resolved[capability] = entries

        if cfg.log_resolution_decisions:
            from query_authz._audit import log_resolution

            log_resolution(
                endpoint=endpoint.identifier,
                capability=capability,
                message=result.name,
                paths=[e.path for e in entries],
            )

    return EndpointPolicy.from_entries(
        endpoint.identifier,
        filtering=resolved.get(Capability.FILTERING),
        sorting=resolved.get(Capability.SORTING),
        field_selection=resolved.get(Capability.FIELD_SELECTION),
    )


def iter_endpoints(unit: SchemaUnit, *, schemas: SchemaRegistry) -> list[EndpointDescriptor]:
    """Return the endpoint descriptors of every method of *unit*, in order.

    Raises:
        SchemaError: A method references an unregistered message type.
    """
    endpoints: list[EndpointDescriptor] = []
    for service in unit.services:
        for method in service.methods:
            endpoints.append(
                EndpointDescriptor.for_method(
                    unit.package,
                    service.name,
                    method.name,
                    schemas.get(method.input_type),
                    schemas.get(method.output_type),
                )
            )
    return endpoints


def compile_policies(
    source: SchemaUnit | Iterable[EndpointDescriptor],
    *,
    schemas: SchemaRegistry,
    config: PolicyConfig | None = None,
) -> PolicyTables:
    """Compile the policy tables of a schema unit.

    Every endpoint is resolved independently. Any error aborts the whole
    unit; no partial tables are returned.

    Args:
        source: A ``SchemaUnit`` or an iterable of endpoint descriptors.
        schemas: Registry used to resolve type references.
        config: Optional config. Defaults to the global config.

    Returns:
        ``PolicyTables`` holding only the endpoints that accept each capability.

    Example::

        tables = compile_policies(unit, schemas=registry)
        tables.sorting.get("/pkg.Users/List")
    """
    if isinstance(source, SchemaUnit):
        endpoints: Iterable[EndpointDescriptor] = iter_endpoints(source, schemas=schemas)
    else:
        endpoints = source
    policies = [resolve_endpoint(e, schemas=schemas, config=config) for e in endpoints]
    return PolicyTables.from_policies(policies)
