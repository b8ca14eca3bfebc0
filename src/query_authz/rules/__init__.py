"""Rules — type classification, operator eligibility and allow/deny resolution."""

from query_authz.rules._classifier import classify, is_json_value, is_well_known
from query_authz.rules._defaults import effective_annotation
from query_authz.rules._operators import (
    check_annotation,
    eligible_operators,
    parse_operator,
    resolve_deny_rules,
)

__all__ = [
    "check_annotation",
    "classify",
    "effective_annotation",
    "eligible_operators",
    "is_json_value",
    "is_well_known",
    "parse_operator",
    "resolve_deny_rules",
]
