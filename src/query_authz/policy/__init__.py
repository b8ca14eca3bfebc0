"""Policy aggregation — per-endpoint filtering, sorting and field-selection tables."""

from query_authz.policy._aggregator import compile_policies, iter_endpoints, resolve_endpoint
from query_authz.policy._markers import (
    RESULT_FIELD_NAMES,
    enabled_capabilities,
    find_result_message,
    has_capability,
)
from query_authz.policy._models import EndpointPolicy, PolicyTables

__all__ = [
    "RESULT_FIELD_NAMES",
    "EndpointPolicy",
    "PolicyTables",
    "compile_policies",
    "enabled_capabilities",
    "find_result_message",
    "has_capability",
    "iter_endpoints",
    "resolve_endpoint",
]
