"""query-authz testing utilities — assertions, table diffing and fixtures.

Provides test helpers for verifying compiled query policies:

- **Assertion helpers**: ``assert_filter_allows``, ``assert_filter_denies``,
  ``assert_sortable``, ``assert_selectable`` and their negations.
- **Regression checks**: ``diff_policy_tables``.
- **Fixtures**: ``schema_registry``, ``policy_config``, ``isolated_policy_config``.

Example::

    from query_authz.testing import assert_filter_denies

    def test_tags_not_filterable(tables):
        assert_filter_denies(tables.policy_for("/pkg.Users/List"), "tags", "EQ")
"""

from query_authz.testing._assertions import (
    assert_filter_allows,
    assert_filter_denies,
    assert_not_selectable,
    assert_not_sortable,
    assert_selectable,
    assert_sortable,
)
from query_authz.testing._diff import PolicyTableDiff, diff_policy_tables
from query_authz.testing._fixtures import isolated_policy_config, policy_config, schema_registry
from query_authz.testing._isolation import isolated_config

__all__ = [
    "PolicyTableDiff",
    "assert_filter_allows",
    "assert_filter_denies",
    "assert_not_selectable",
    "assert_not_sortable",
    "assert_selectable",
    "assert_sortable",
    "diff_policy_tables",
    "isolated_config",
    "isolated_policy_config",
    "policy_config",
    "schema_registry",
]
