"""Resolver — turns annotated message schemas into resolved policy entries."""

from query_authz.resolver._models import ResolvedFieldPolicy
from query_authz.resolver._nesting import allow_nested, nesting_depth
from query_authz.resolver._resolver import resolve_rules

__all__ = [
    "ResolvedFieldPolicy",
    "allow_nested",
    "nesting_depth",
    "resolve_rules",
]
