"""explain_endpoint() — explain how an endpoint's tables are derived."""

from __future__ import annotations

from query_authz._types import CAPABILITY_MARKERS, Capability
from query_authz.config._config import PolicyConfig, get_global_config
from query_authz.explain._models import CapabilityExplanation, EndpointExplanation
from query_authz.policy._aggregator import resolve_endpoint
from query_authz.policy._markers import find_result_message, has_capability
from query_authz.resolver._nesting import nesting_depth
from query_authz.schema._model import EndpointDescriptor
from query_authz.schema._registry import SchemaRegistry

__all__ = ["explain_endpoint"]


def explain_endpoint(
    endpoint: EndpointDescriptor,
    *,
    schemas: SchemaRegistry,
    config: PolicyConfig | None = None,
) -> EndpointExplanation:
    """Explain which tables an endpoint gets and what they contain.

    Runs the same resolution as :func:`~query_authz.policy.resolve_endpoint`
    and reports marker presence, the located result message and the
    resolved paths of every capability.

    Args:
        endpoint: The endpoint to explain.
        schemas: Registry used to resolve type references.
        config: Optional config. Defaults to the global config.

    Returns:
        An ``EndpointExplanation``.

    Example::

        print(explain_endpoint(endpoint, schemas=registry))
    """
    cfg = config if config is not None else get_global_config()
    policy = resolve_endpoint(endpoint, schemas=schemas, config=cfg)
    result = find_result_message(endpoint.response, schemas=schemas)

    explanations: list[CapabilityExplanation] = []
    for capability in Capability:
        if capability is Capability.FILTERING:
            paths = tuple(policy.filtering) if policy.filtering is not None else ()
        elif capability is Capability.SORTING:
            paths = policy.sortable or ()
        else:
            paths = policy.selectable or ()
        explanations.append(
            CapabilityExplanation(
                capability=capability.value,
                marker=CAPABILITY_MARKERS[capability],
                requested=has_capability(endpoint.request, capability),
                resolved=policy.has(capability),
                entry_count=len(paths),
                paths=paths,
            )
        )

    return EndpointExplanation(
        endpoint=endpoint.identifier,
        result_message=result.name if result is not None else None,
        depth_budget=nesting_depth(result, cfg) if result is not None else 0,
        capabilities=explanations,
    )
